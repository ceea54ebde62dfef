"""
Error taxonomy for the augmentation run.
Only UsageError is fatal; the driver logs the others and carries on.
"""


class AugmentError(Exception):
    """Base class for every error raised by dataaug."""


class UsageError(AugmentError):
    """Not enough command-line arguments."""


class DecodeError(AugmentError):
    """A directory entry could not be decoded as an image."""


class InvalidImage(AugmentError, ValueError):
    """A transform received a degenerate image or the wrong channel count."""


class PersistError(AugmentError):
    """An output image could not be written."""
