"""hunkwise: structured parsing of git diff, status and log output.

Turns raw text produced by git into immutable records that a UI or staging
layer can navigate, and serializes a single hunk back into a patch fragment
suitable for partial application.
"""

__version__ = "0.1.0"
