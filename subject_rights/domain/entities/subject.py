"""Subject domain entity.

Represents the data subject's identity record, independent of persistence.
"""

from dataclasses import dataclass, field
from typing import Any

from subject_rights.domain.exceptions import ValidationException


@dataclass
class Subject:
    """Domain entity for the primary data subject.

    record holds the identity row as loaded (column -> value, in table
    column order) and is what the identity export is built from. The typed
    fields are the ones erasure rewrites; to_record() merges them back.
    """

    id: int
    name: str
    username: str
    email: str
    block: bool = False
    record: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_guest(self) -> bool:
        """Return True for the anonymous identity (no account id)."""
        return not self.id

    def to_record(self) -> dict[str, Any]:
        """Return the full identity row with the current identity fields applied."""
        data = dict(self.record)
        data.update(
            id=self.id,
            name=self.name,
            username=self.username,
            email=self.email,
            block=self.block,
        )
        return data

    def pseudonymize(self, name: str, username: str, email: str) -> None:
        """Replace identifying fields and block the account.

        Raises ValidationException if any replacement is empty.
        """
        for field_name, value in (("name", name), ("username", username), ("email", email)):
            if not value:
                raise ValidationException(
                    f"Pseudonymized {field_name} must not be empty", field=field_name
                )
        self.name = name
        self.username = username
        self.email = email
        self.block = True
