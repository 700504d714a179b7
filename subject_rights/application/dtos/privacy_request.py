"""DTOs for privacy requests read from the request store."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PrivacyRequestResult:
    """Privacy request read-model. user_id is None/0 when the requester has no account."""

    id: int
    email: str
    request_type: str
    status: str
    requested_at: datetime | None = None
    user_id: int | None = None
