# =============================================================================
# hayvn_core/errors/__init__.py
# Centralized Error Handling for the Hayvn-RE agent workspace
# =============================================================================

from .exceptions import (
    HayvnError,
    AuthServiceError,
    SignInError,
    RouteNotFoundError,
    ConfigurationError,
)

from .handlers import (
    handle_error,
    ErrorContext,
)

__all__ = [
    # Exceptions
    "HayvnError",
    "AuthServiceError",
    "SignInError",
    "RouteNotFoundError",
    "ConfigurationError",
    # Handlers
    "handle_error",
    "ErrorContext",
]
