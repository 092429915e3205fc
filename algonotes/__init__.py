"""Classic searches, in-place sorts and linked lists of strings."""

__version__ = "0.1.0"