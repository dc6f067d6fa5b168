# =============================================================================
# hayvn_core/errors/exceptions.py
# Custom Exception Hierarchy for the Hayvn-RE agent workspace
# =============================================================================

from typing import Optional, Dict, Any


class HayvnError(Exception):
    """
    Base exception for all Hayvn-RE workspace errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "AUTH_001")
        details: Additional context as a dictionary
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "HAYVN_000"
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            base += f" | Details: {self.details}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# AUTH EXCEPTIONS
# =============================================================================

class AuthServiceError(HayvnError):
    """Raised when a call to the auth provider fails"""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            code="AUTH_001",
            details=details,
            **kwargs,
        )


class SignInError(HayvnError):
    """Raised when a sign-in request is rejected or cannot be sent"""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        email: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if method:
            details["method"] = method
        if email:
            details["email"] = email

        super().__init__(
            message=message,
            code="AUTH_002",
            details=details,
            **kwargs,
        )


# =============================================================================
# NAVIGATION EXCEPTIONS
# =============================================================================

class RouteNotFoundError(HayvnError):
    """Raised when a destination path has no page behind it"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path

        super().__init__(
            message=message,
            code="NAV_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class ConfigurationError(HayvnError):
    """Raised when configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type

        super().__init__(
            message=message,
            code="CONFIG_001",
            details=details,
            recoverable=False,
            **kwargs,
        )
