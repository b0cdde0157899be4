"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from loginform.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Validation settings for the login form. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(min_password_length=8)
    """

    # Password policy
    min_password_length: int = 6

    # Messages, in rule order
    email_required_message: str = "Enter an E-Mail Address"
    email_invalid_message: str = "Enter a Valid E-mail Address"
    password_required_message: str = "Enter a Password"
    password_too_short_message: str = "Enter at least 6 Digit password"

    def __post_init__(self) -> None:
        if self.min_password_length < 1:
            msg = (
                f"min_password_length must be at least 1, "
                f"got {self.min_password_length}"
            )
            raise ConfigurationError(msg)


DEFAULT_CONFIG = FormConfig()
