"""Login form validation rules.

Each check is a plain predicate::

    def check(value: str) -> bool:
        '''Return True when the value passes.'''

A ``Rule`` pairs a check with the field it reads and the message to
report. Parameterized checks are factory functions::

    def min_length(n: int) -> Check:
        def check(value: str) -> bool:
            return len(value) >= n
        return check
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from loginform.config import DEFAULT_CONFIG, FormConfig
from loginform.credentials import Credentials
from loginform.validation.result import Field, Invalid

# Type alias for a check function
type Check = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Rule:
    """One link in the rule chain."""

    field: Field
    check: Check
    message: str

    def value_of(self, snapshot: Credentials) -> str:
        return getattr(snapshot, self.field.value)

    def apply(self, snapshot: Credentials) -> Invalid | None:
        """Return ``Invalid`` if the check fails, or ``None`` if it passes."""
        if self.check(self.value_of(snapshot)):
            return None
        return Invalid(field=self.field, message=self.message)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def is_present(value: str) -> bool:
    """Value must be non-empty. Whitespace counts as content."""
    return len(value) > 0


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structural check only: one "@", a "." after it, no whitespace
_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def looks_like_email(value: str) -> bool:
    """Value must have the rough shape of an email address."""
    return _EMAIL_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int) -> Check:
    """String must be at least *n* characters."""

    def check(value: str) -> bool:
        return len(value) >= n

    return check


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------


def login_rules(config: FormConfig | None = None) -> tuple[Rule, ...]:
    """The ordered rule chain for the login form.

    Order matters: ``validate()`` reports the first failure, so the most
    fundamental problem (a missing email) comes first.
    """
    config = config or DEFAULT_CONFIG
    return (
        Rule(Field.EMAIL_ADDRESS, is_present, config.email_required_message),
        Rule(Field.EMAIL_ADDRESS, looks_like_email, config.email_invalid_message),
        Rule(Field.PASSWORD, is_present, config.password_required_message),
        Rule(
            Field.PASSWORD,
            min_length(config.min_password_length),
            config.password_too_short_message,
        ),
    )
