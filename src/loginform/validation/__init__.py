"""Login validation: an ordered rule chain, one error at a time.

Usage::

    from loginform.validation import Invalid, validate

    result = validate(state.last_submitted)
    if not result:
        show_error(result.field, result.message)
    else:
        show_values(result.email_address, result.password)
"""

from loginform.config import FormConfig
from loginform.credentials import Credentials
from loginform.validation.result import Field, Invalid, Valid, ValidationResult
from loginform.validation.rules import (
    Check,
    Rule,
    is_present,
    login_rules,
    looks_like_email,
    min_length,
)

__all__ = [
    "Check",
    "Field",
    "Invalid",
    "Rule",
    "Valid",
    "ValidationResult",
    "collect_errors",
    "is_present",
    "login_rules",
    "looks_like_email",
    "min_length",
    "validate",
]


def validate(
    snapshot: Credentials,
    config: FormConfig | None = None,
) -> ValidationResult:
    """Validate a credentials snapshot against the login rule chain.

    Args:
        snapshot: The values captured on submit. Empty strings are
            ordinary input, not errors.
        config: Overrides the minimum password length and messages.
            Defaults to ``DEFAULT_CONFIG``.

    Returns:
        ``Invalid`` for the first failing rule, or ``Valid`` echoing the
        snapshot's values. Never raises for any snapshot.

    Example::

        validate(Credentials("bob@example.com", "abc"))
        # Invalid(field=Field.PASSWORD, message="Enter at least 6 Digit password")
    """
    for rule in login_rules(config):
        error = rule.apply(snapshot)
        if error is not None:
            return error
    return Valid(email_address=snapshot.email_address, password=snapshot.password)


def collect_errors(
    snapshot: Credentials,
    config: FormConfig | None = None,
) -> dict[Field, list[str]]:
    """Run every rule and collect messages per field.

    A field's remaining rules are skipped once its presence check fails
    (no point checking the shape of an empty string). An empty dict
    means the snapshot is valid.
    """
    errors: dict[Field, list[str]] = {}
    missing: set[Field] = set()
    for rule in login_rules(config):
        if rule.field in missing:
            continue
        error = rule.apply(snapshot)
        if error is None:
            continue
        errors.setdefault(error.field, []).append(error.message)
        if rule.check is is_present:
            missing.add(rule.field)
    return errors
