"""
Unified exception hierarchy for Hive Feed Setup.

Every error the wizard reports to the operator is one of these.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from hive_feed_setup.core.utils.datetime_utils import format_iso, utc_now


class FeedSetupError(Exception):
    """
    Base error of the setup tool.

    Features:
    1. Structured serialization
    2. Rich context
    3. Resolution suggestions
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        self.timestamp: datetime = utc_now()
        self.message: str = message
        self.code: str = code or self.__class__.__name__
        self.context: Dict[str, Any] = context or {}
        self.cause: Optional[Exception] = cause
        self.suggestions: List[str] = []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for logging.

        Returns:
            {
                "code": "ValidationError",
                "message": "Invalid account name...",
                "timestamp": "2024-01-20T10:30:00Z",
                "context": {...}
            }
        """
        result: Dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "timestamp": format_iso(self.timestamp),
            "context": self.context,
        }

        if self.cause:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}

        if self.suggestions:
            result["suggestions"] = self.suggestions

        return result

    def add_suggestion(self, suggestion: str) -> None:
        """
        Add a resolution hint shown to the operator after the message.

        Duplicates and empty strings are ignored.
        """
        if not suggestion or not isinstance(suggestion, str):
            return

        if suggestion not in self.suggestions:
            self.suggestions.append(suggestion)

    def is_recoverable(self) -> bool:
        """Whether the interactive flow can re-prompt after this error."""
        return False


class ValidationError(FeedSetupError):
    """
    A supplied value does not satisfy its field constraint.

    The rejected value is never stored in ``context`` for secret fields.
    """

    def __init__(self, field: str, message: str, value: Optional[str] = None) -> None:
        context: Dict[str, Any] = {"field": field}
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context)
        self.field = field

    def is_recoverable(self) -> bool:
        return True


class MissingRequiredInput(FeedSetupError):
    """A required field was left blank and there is no default to fall back to."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{field} is required.", context={"field": field})
        self.field = field

    def is_recoverable(self) -> bool:
        return True


class UnknownOption(FeedSetupError):
    """Unrecognized command line option."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown option: {option}", context={"option": option})
        self.option = option


class ConfigurationError(FeedSetupError):
    """The configuration store could not be read, backed up or written."""

    pass


class SetupCancelled(Exception):
    """Raised when the operator declines to save the configuration"""
