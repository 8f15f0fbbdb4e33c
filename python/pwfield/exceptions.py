"""
Custom exceptions for pwfield.
"""


class PasswordFieldException(Exception):
    """Base exception for pwfield."""

    pass


class UnknownOptionError(PasswordFieldException):
    """Option key is not one the renderer understands."""

    pass


class ConfigError(PasswordFieldException):
    """Configuration file could not be loaded."""

    pass


class HashingError(PasswordFieldException):
    """Value could not be hashed."""

    pass
