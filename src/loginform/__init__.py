"""loginform — observable login form state with ordered validation.

Basic usage::

    from loginform import FormState, LoginBinding

    state = FormState()
    binding = LoginBinding.attach(state)

    state.set_email_address("bob@example.com")
    state.set_password("abc")
    state.submit()

    binding.password_error  # "Enter at least 6 Digit password"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Credentials",
    "Field",
    "FormConfig",
    "FormState",
    "Invalid",
    "LoginBinding",
    "LoginFormError",
    "Subscription",
    "Valid",
    "ValidationResult",
    "render_result",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import loginform`` fast (no kida import) while providing a
    clean top-level API.
    """
    if name == "Credentials":
        from loginform.credentials import Credentials

        return Credentials

    if name in ("FormState", "Subscription"):
        from loginform import state

        return getattr(state, name)

    if name == "FormConfig":
        from loginform.config import FormConfig

        return FormConfig

    if name in ("LoginFormError", "ConfigurationError"):
        from loginform import errors

        return getattr(errors, name)

    if name in ("Field", "Invalid", "Valid", "ValidationResult", "validate"):
        from loginform import validation

        return getattr(validation, name)

    if name == "LoginBinding":
        from loginform.binding import LoginBinding

        return LoginBinding

    if name == "render_result":
        from loginform.rendering import render_result

        return render_result

    msg = f"module 'loginform' has no attribute {name!r}"
    raise AttributeError(msg)
