"""Headless view binding for the login form.

``LoginBinding`` is what a screen binds its widgets to. It subscribes to
a ``FormState``, validates every submitted snapshot, and exposes the
outcome as plain attributes:

- ``email_error`` / ``password_error``: message to attach to a field
- ``focus``: the field that should receive input focus
- ``result_email_address`` / ``result_password``: echo labels shown
  after a successful submit

Any renderer (terminal, web template, GUI toolkit) reads these after
``submit()`` returns, or registers ``on_result()`` to be told.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from loginform.config import FormConfig
from loginform.credentials import Credentials
from loginform.state import FormState, Subscription
from loginform.validation import Field, Invalid, ValidationResult, validate

logger = logging.getLogger("loginform.binding")

type ResultListener = Callable[[ValidationResult], None]


class LoginBinding:
    """Validation outcome of the latest submit, ready to display."""

    __slots__ = (
        "_config",
        "_listeners",
        "_subscription",
        "email_error",
        "focus",
        "last_result",
        "password_error",
        "result_email_address",
        "result_password",
    )

    def __init__(self, config: FormConfig | None = None) -> None:
        self._config = config
        self._listeners: list[ResultListener] = []
        self._subscription: Subscription | None = None
        self.email_error: str | None = None
        self.password_error: str | None = None
        self.focus: Field | None = None
        self.result_email_address: str = ""
        self.result_password: str = ""
        self.last_result: ValidationResult | None = None

    @classmethod
    def attach(cls, state: FormState, config: FormConfig | None = None) -> LoginBinding:
        """Create a binding subscribed to *state*."""
        binding = cls(config)
        binding.bind(state)
        return binding

    def bind(self, state: FormState) -> None:
        """Subscribe to *state*, replacing any previous subscription."""
        self.detach()
        self._subscription = state.subscribe(self._on_submit)

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def on_result(self, listener: ResultListener) -> None:
        """Call *listener* with every result, after the binding updates."""
        self._listeners.append(listener)

    def error_for(self, field: Field) -> str | None:
        if field is Field.EMAIL_ADDRESS:
            return self.email_error
        return self.password_error

    def apply(self, result: ValidationResult) -> None:
        """Update the displayed state from *result*."""
        self.last_result = result
        match result:
            case Invalid(field=field, message=message):
                self.email_error = message if field is Field.EMAIL_ADDRESS else None
                self.password_error = message if field is Field.PASSWORD else None
                self.focus = field
                logger.debug("Invalid %s: %s", field.value, message)
            case _:
                self.email_error = None
                self.password_error = None
                self.focus = None
                self.result_email_address = result.email_address
                self.result_password = result.password
                logger.debug("Valid submit for %s", result.email_address)

    def _on_submit(self, snapshot: Credentials) -> None:
        result = validate(snapshot, self._config)
        self.apply(result)
        for listener in tuple(self._listeners):
            listener(result)

    def __enter__(self) -> LoginBinding:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.detach()
