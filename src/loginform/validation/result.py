"""Validation result: a tagged variant of ``Invalid`` or ``Valid``."""

from dataclasses import dataclass
from enum import Enum

from loginform.credentials import Credentials


class Field(Enum):
    """The form field an error belongs to."""

    EMAIL_ADDRESS = "email_address"
    PASSWORD = "password"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Field.EMAIL_ADDRESS: "E-Mail",
    Field.PASSWORD: "Password",
}


@dataclass(frozen=True, slots=True)
class Invalid:
    """The first rule that failed, and the field it applies to.

    Falsy, so you can write::

        result = validate(snapshot)
        if not result:
            show_error(result.field, result.message)
    """

    field: Field
    message: str

    @property
    def is_valid(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True, repr=False)
class Valid:
    """Every rule passed. Echoes the validated values unchanged."""

    email_address: str
    password: str

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def credentials(self) -> Credentials:
        return Credentials(email_address=self.email_address, password=self.password)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Valid(email_address={self.email_address!r}, password='***')"


type ValidationResult = Invalid | Valid
