"""Removal status value object (result of the erasure eligibility check)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemovalStatus:
    """Whether data for a request may be removed, and why not when denied.

    A denial always carries a non-empty reason; a permit never does.
    """

    can_remove: bool = True
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.can_remove and self.reason is not None:
            raise ValueError("A permitted removal status must not carry a reason")
        if not self.can_remove and not self.reason:
            raise ValueError("A denied removal status requires a reason")

    @classmethod
    def permitted(cls) -> "RemovalStatus":
        return cls()

    @classmethod
    def denied(cls, reason: str) -> "RemovalStatus":
        return cls(can_remove=False, reason=reason)
