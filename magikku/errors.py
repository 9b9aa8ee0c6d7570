"""Exceptions raised by magikku."""


class MagicError(Exception):
    """
    A base class for other Magic error types.
    :param errno: Error number reported by libmagic (if any).
    """
    def __init__(self, message, errno=None):
        super().__init__(message)
        self.errno = errno


class InvalidArgumentError(MagicError, TypeError):
    """Raised when an argument of a wrong type or shape is given."""
    pass


class InitializationError(MagicError):
    """Raised when an unexpected fatal error occurs initializing libmagic."""
    pass


class DatabaseLoadError(MagicError):
    """Raised when an error occurs during loading of a magic database."""
    pass


class CompileError(MagicError):
    """Raised when an error occurs during compiling of a magic database."""
    pass


class FlagError(MagicError):
    """Raised when an error occurs when setting flags on a Magic object."""
    pass


class ClosedHandleError(MagicError):
    """Raised when a closed Magic object is used."""
    pass
