"""Form state: live input values plus the last submitted snapshot.

``FormState`` is the mutable holder the presentation layer owns. Text
events call the setters; a submit trigger calls ``submit()``, which
captures an immutable ``Credentials`` snapshot and hands it to every
subscriber before returning.

Example::

    state = FormState()
    state.subscribe(lambda creds: print(validate(creds)))

    state.set_email_address("bob@example.com")
    state.set_password("abcdef")
    state.submit()  # subscriber runs here, synchronously
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from loginform.credentials import Credentials

logger = logging.getLogger("loginform.state")

type Subscriber = Callable[[Credentials], None]


class Subscription:
    """Handle returned by ``FormState.subscribe()``.

    ``close()`` is idempotent. Also works as a context manager so a
    subscription can be scoped to a block::

        with state.subscribe(handler):
            state.submit()
    """

    __slots__ = ("_callback", "_state")

    def __init__(self, state: FormState, callback: Subscriber) -> None:
        self._state: FormState | None = state
        self._callback = callback

    @property
    def active(self) -> bool:
        return self._state is not None

    def close(self) -> None:
        if self._state is not None:
            self._state.unsubscribe(self._callback)
            self._state = None

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FormState:
    """Mutable holder for the login form's input.

    Single-threaded: mutations and notifications happen on the caller's
    control thread. Subscribers are invoked in subscription order, and
    ``submit()`` returns only after all of them have run.
    """

    __slots__ = ("_subscribers", "email_address", "last_submitted", "password")

    def __init__(self) -> None:
        self.email_address: str = ""
        self.password: str = ""
        self.last_submitted: Credentials | None = None
        self._subscribers: list[Subscriber] = []

    def set_email_address(self, value: str | None) -> None:
        self.email_address = value or ""

    def set_password(self, value: str | None) -> None:
        self.password = value or ""

    def clear(self) -> None:
        """Reset the live values. ``last_submitted`` is kept."""
        self.email_address = ""
        self.password = ""

    def snapshot(self) -> Credentials:
        """Capture the current input without recording or notifying."""
        return Credentials(email_address=self.email_address, password=self.password)

    def subscribe(self, callback: Subscriber) -> Subscription:
        """Register *callback* to receive each submitted snapshot."""
        self._subscribers.append(callback)
        return Subscription(self, callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove *callback*. Unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def submit(self) -> Credentials:
        """Record a snapshot as ``last_submitted`` and notify subscribers.

        Safe to call with no subscribers: the snapshot is still recorded.
        A subscriber that raises is logged and the error propagates to
        the caller; ``last_submitted`` is already updated by then.

        Returns:
            The snapshot that was recorded.
        """
        snapshot = self.snapshot()
        self.last_submitted = snapshot

        if not self._subscribers:
            logger.debug("Submit with no subscribers: %r", snapshot)
            return snapshot

        logger.debug("Submit to %d subscriber(s): %r", len(self._subscribers), snapshot)
        # Copy so a subscriber may unsubscribe itself mid-notification
        for callback in tuple(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Submit subscriber %r failed", callback)
                raise
        return snapshot
