"""Custom exception hierarchy for realty."""


class RealtyError(Exception):
    """Base exception for all realty errors."""


class FormatError(RealtyError, ValueError):
    """Raised when a persisted line or user input cannot be parsed."""


class DuplicateKeyError(RealtyError):
    """Raised when a property id is already in the inventory."""


class NotFoundError(RealtyError, KeyError):
    """Raised when a referenced property does not exist."""

    def __str__(self) -> str:
        # KeyError wraps its message in quotes
        return str(self.args[0]) if self.args else ""


class InvalidEntityStateError(RealtyError):
    """Raised when a property is in an invalid state for the operation."""


class AlreadySoldError(InvalidEntityStateError):
    """Raised when buying a property that is already sold."""


class AlreadyAvailableError(InvalidEntityStateError):
    """Raised when selling a property that is already available."""


class InvalidActionError(RealtyError):
    """Raised when an action string is not one of the accepted choices."""


class ConfigurationError(RealtyError):
    """Raised when configuration is invalid or missing."""


class PersistenceError(RealtyError):
    """Raised when the backing file cannot be written."""
