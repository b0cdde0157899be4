"""Credentials snapshot: the immutable value captured on submit."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, repr=False)
class Credentials:
    """An email/password pair captured at a point in time.

    Two snapshots with equal fields are interchangeable. The password is
    masked in ``repr()`` so snapshots can be logged safely.
    """

    email_address: str = ""
    password: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> Credentials:
        """Build a snapshot from a form post or plain dict.

        Missing keys and ``None`` values become empty strings.
        """
        return cls(
            email_address=data.get("email_address") or "",
            password=data.get("password") or "",
        )

    def __repr__(self) -> str:
        masked = "'***'" if self.password else "''"
        return f"Credentials(email_address={self.email_address!r}, password={masked})"
