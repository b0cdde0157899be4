"""loginform exception hierarchy.

Validation failures are never raised; they come back as ``Invalid``
results. These types cover misuse of the library itself.
"""


class LoginFormError(Exception):
    """Base for all loginform-specific errors."""


class ConfigurationError(LoginFormError):
    """Raised when a ``FormConfig`` is invalid.

    Typically surfaces at construction time, before any form is validated.
    """
