"""Subject erasure: pseudonymize the identity record and end every live session."""

from __future__ import annotations

import logging
import secrets

from subject_rights.application.interfaces.repositories import (
    IRowStore,
    ISubjectDirectory,
)
from subject_rights.application.interfaces.services import ISessionStore
from subject_rights.core.config import MIN_LOGIN_TOKEN_BYTES
from subject_rights.core.constants import TABLE_SESSION
from subject_rights.domain.exceptions import (
    PersistenceFailureException,
    SessionStoreException,
    ValidationException,
)
from subject_rights.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class SubjectErasureExecutor:
    """Irreversibly pseudonymizes one subject.

    Name and email are rewritten from templates containing {subject_id}; the
    login becomes a random hex token; the account is blocked. The identity is
    persisted before any session is touched. Sessions are destroyed in the
    live store one by one (failures are logged), then their rows are deleted
    in a single statement.
    """

    def __init__(
        self,
        subject_directory: ISubjectDirectory,
        row_store: IRowStore,
        session_store: ISessionStore,
        *,
        name_template: str,
        email_template: str,
        login_token_bytes: int = MIN_LOGIN_TOKEN_BYTES,
    ) -> None:
        if login_token_bytes < MIN_LOGIN_TOKEN_BYTES:
            raise ValidationException(
                f"login_token_bytes must be at least {MIN_LOGIN_TOKEN_BYTES}",
                field="login_token_bytes",
            )
        self._subject_directory = subject_directory
        self._row_store = row_store
        self._session_store = session_store
        self._name_template = name_template
        self._email_template = email_template
        self._login_token_bytes = login_token_bytes

    @traced("privacy.erase_subject")
    async def erase_subject(self, subject_id: int | None) -> None:
        if not subject_id:
            return
        subject = await self._subject_directory.load_subject(subject_id)
        if subject is None or subject.is_guest:
            logger.info("Erasure skipped: subject %s not found", subject_id)
            return

        subject.pseudonymize(
            name=self._name_template.format(subject_id=subject.id),
            username=secrets.token_hex(self._login_token_bytes),
            email=self._email_template.format(subject_id=subject.id),
        )
        if not await self._subject_directory.save(subject):
            raise PersistenceFailureException(subject.id, "identity record not found")
        logger.info("Pseudonymized identity of subject %s", subject.id)

        rows = await self._row_store.query(TABLE_SESSION, {"userid": subject.id})
        session_ids = [row["session_id"] for row in rows]
        if not session_ids:
            return

        for session_id in session_ids:
            try:
                await self._session_store.destroy(session_id)
            except SessionStoreException as e:
                logger.warning(
                    "Failed to destroy session of subject %s: %s", subject.id, e.message
                )
        deleted = await self._row_store.delete(TABLE_SESSION, {"session_id": session_ids})
        add_span_attributes(**{"erasure.sessions_deleted": deleted})
        logger.info("Removed %d sessions of subject %s", deleted, subject.id)
