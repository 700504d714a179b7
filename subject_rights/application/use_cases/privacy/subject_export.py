"""Subject data export: assemble every personal-data domain for one subject."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from subject_rights.application.interfaces.repositories import (
    ICustomFieldResolver,
    IRowStore,
    ISubjectDirectory,
)
from subject_rights.application.use_cases.privacy.domain_builder import DomainBuilder
from subject_rights.core.constants import (
    CREDENTIAL_COLUMNS,
    NOTE_ACTOR_COLUMNS,
    SCHEMA_KEY_USER,
    TABLE_CONTACTS,
    TABLE_CONTENT,
    TABLE_MESSAGES,
    TABLE_USER_NOTES,
    TABLE_USER_PROFILES,
)
from subject_rights.domain.entities.export import ExportDomain, SecondarySubject
from subject_rights.domain.entities.subject import Subject
from subject_rights.domain.enums import SecondarySubjectKind
from subject_rights.domain.exceptions import (
    DataSourceException,
    ExportIncompleteException,
)
from subject_rights.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class SubjectExportOrchestrator:
    """Builds the ordered export domains for one subject.

    Order: users, user notes, user profile, user custom fields, user message,
    user contact, one contact custom fields domain per contact, user content,
    one content custom fields domain per content row. Empty domains are
    emitted. A failing data source aborts the run with
    ExportIncompleteException naming the domain and carrying those already built.
    """

    def __init__(
        self,
        subject_directory: ISubjectDirectory,
        row_store: IRowStore,
        field_resolver: ICustomFieldResolver,
    ) -> None:
        self._subject_directory = subject_directory
        self._row_store = row_store
        self._field_resolver = field_resolver

    @traced("privacy.export_subject")
    async def export_subject(self, subject_id: int | None) -> list[ExportDomain]:
        """Return the subject's export domains; [] when there is no account to export."""
        if not subject_id:
            return []
        subject = await self._subject_directory.load_subject(subject_id)
        if subject is None or subject.is_guest:
            logger.info("Export skipped: subject %s not found", subject_id)
            return []

        run = _ExportRun(self._row_store, self._field_resolver, subject)
        await run.add("users", run.users_domain)
        await run.add("user notes", run.notes_domain)
        await run.add("user profile", run.profile_domain)
        await run.add("user custom fields", run.user_fields_domain)
        await run.add("user message", run.messages_domain)
        await run.add("user contact", run.contacts_domain)
        for contact in run.builder.drain(SecondarySubjectKind.CONTACT):
            await run.add(
                "contact custom fields",
                lambda contact=contact: run.secondary_fields_domain(
                    contact, "contact custom fields", "Custom field values of a contact record"
                ),
            )
        await run.add("user content", run.content_domain)
        for content in run.builder.drain(SecondarySubjectKind.CONTENT):
            await run.add(
                "content custom fields",
                lambda content=content: run.secondary_fields_domain(
                    content, "content custom fields", "Custom field values of a content item"
                ),
            )

        add_span_attributes(
            **{"export.domain_count": len(run.domains), "export.subject_id": subject.id}
        )
        logger.info(
            "Exported subject %s: %d domains, %d items",
            subject.id,
            len(run.domains),
            sum(len(d.items) for d in run.domains),
        )
        return run.domains


_OWNER_KEYS = {
    SecondarySubjectKind.CONTACT: "contact_id",
    SecondarySubjectKind.CONTENT: "content_id",
}


class _ExportRun:
    """State of a single export call: its builder (discovery list) and built domains."""

    def __init__(
        self,
        row_store: IRowStore,
        field_resolver: ICustomFieldResolver,
        subject: Subject,
    ) -> None:
        self._rows = row_store
        self._fields = field_resolver
        self.subject = subject
        self.builder = DomainBuilder()
        self.domains: list[ExportDomain] = []

    async def add(self, name: str, build: Callable[[], Awaitable[ExportDomain]]) -> None:
        try:
            domain = await build()
        except DataSourceException as e:
            logger.error(
                "Export of subject %s failed at domain '%s': %s",
                self.subject.id,
                name,
                e.message,
            )
            raise ExportIncompleteException(
                name, e.details.get("reason", e.message), self.domains
            ) from e
        self.domains.append(domain)

    async def users_domain(self) -> ExportDomain:
        return self.builder.build_domain(
            "users",
            "User account record",
            [self.subject.to_record()],
            id_column="id",
            redact_columns=CREDENTIAL_COLUMNS,
        )

    async def notes_domain(self) -> ExportDomain:
        rows = await self._rows.query(
            TABLE_USER_NOTES, {"user_id": self.subject.id}, order_by=("id",)
        )
        return self.builder.build_domain(
            "user notes",
            "Notes recorded about the user",
            rows,
            id_column="id",
            redact_columns=NOTE_ACTOR_COLUMNS,
        )

    async def profile_domain(self) -> ExportDomain:
        rows = await self._rows.query(
            TABLE_USER_PROFILES,
            {"user_id": self.subject.id},
            order_by=("ordering", "profile_key"),
        )
        return self.builder.build_domain("user profile", "User profile entries", rows)

    async def user_fields_domain(self) -> ExportDomain:
        fields = await self._fields.get_fields(SCHEMA_KEY_USER, self.subject.to_record())
        return self.builder.build_custom_field_domain(
            "user custom fields",
            "Custom field values of the user account",
            "user_id",
            self.subject.id,
            fields,
        )

    async def messages_domain(self) -> ExportDomain:
        rows = await self._rows.query(
            TABLE_MESSAGES,
            {"user_id_from": self.subject.id, "user_id_to": self.subject.id},
            order_by=("date_time", "message_id"),
            match_any=True,
        )
        return self.builder.build_domain("user message", "Private messages sent or received by the user", rows)

    async def contacts_domain(self) -> ExportDomain:
        rows = await self._rows.query(
            TABLE_CONTACTS, {"user_id": self.subject.id}, order_by=("ordering", "id")
        )
        return self.builder.build_domain(
            "user contact",
            "Contact records linked to the user",
            rows,
            discover=SecondarySubjectKind.CONTACT,
        )

    async def content_domain(self) -> ExportDomain:
        rows = await self._rows.query(
            TABLE_CONTENT, {"created_by": self.subject.id}, order_by=("ordering", "id")
        )
        return self.builder.build_domain(
            "user content",
            "Content items created by the user",
            rows,
            discover=SecondarySubjectKind.CONTENT,
        )

    async def secondary_fields_domain(
        self, secondary: SecondarySubject, name: str, description: str
    ) -> ExportDomain:
        fields = await self._fields.get_fields(secondary.schema_key, secondary.record)
        return self.builder.build_custom_field_domain(
            name, description, _OWNER_KEYS[secondary.kind], secondary.id, fields
        )
