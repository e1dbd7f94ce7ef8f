# core/errors.py
from __future__ import annotations


class PasswordError(Exception):
    """Base class for every failure raised by the password core."""


class EmptySelection(PasswordError, ValueError):
    def __init__(self, message: str = "Please select at least one character set"):
        super().__init__(message)


class InvalidLength(PasswordError, ValueError):
    def __init__(self, length: int, min_length: int, max_length: int):
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(f"Password length must be between {min_length} and {max_length} (got {length}).")


class LengthTooShortForRequirements(PasswordError, ValueError):
    def __init__(self, length: int, required: int):
        self.length = length
        self.required = required
        super().__init__(f"Length ({length}) is too short for {required} required character sets.")


class RandomSourceUnavailable(PasswordError, RuntimeError):
    def __init__(self, message: str = "No cryptographically secure random source is available on this platform."):
        super().__init__(message)
