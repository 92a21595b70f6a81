"""Allow ``python -m hunkwise``."""

from hunkwise.cli.main import run

if __name__ == "__main__":
    run()
