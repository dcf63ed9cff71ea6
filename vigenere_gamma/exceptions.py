"""Validation errors raised by the cipher and its text helpers."""


class CipherError(ValueError):
    """Base class: a precondition on the caller's input was not met."""


class EmptyInputError(CipherError):
    """The text (or ciphertext) contains no alphabet letters."""


class EmptyKeyError(CipherError):
    """The key contains no alphabet letters."""


class InvalidTextError(CipherError):
    """Input or file content rejected before it reaches the cipher."""
