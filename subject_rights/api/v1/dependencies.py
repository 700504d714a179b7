"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the privacy request service.
The service is built from infrastructure implementations here; routes
depend only on these dependencies, not on infra directly. The CLI reuses
build_privacy_request_service.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from subject_rights.application.interfaces.services import ISessionStore
from subject_rights.application.use_cases.privacy import (
    PrivacyRequestService,
    RemovalEligibilityChecker,
    SubjectErasureExecutor,
    SubjectExportOrchestrator,
)
from subject_rights.core.config import Settings, get_settings
from subject_rights.core.messages import (
    PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER,
    translate,
)
from subject_rights.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from subject_rights.infrastructure.persistence.repositories import (
    PrivacyRequestRepository,
    SqlCustomFieldResolver,
    SqlRowStore,
    SqlSubjectDirectory,
)
from subject_rights.infrastructure.services import PermissionResolver
from subject_rights.infrastructure.sessions import SessionStoreFactory


def build_privacy_request_service(
    db: AsyncSession,
    *,
    session_store: ISessionStore | None = None,
    settings: Settings | None = None,
) -> PrivacyRequestService:
    """Wire the privacy request service on one session.

    Without a session_store the service can check and export but not erase.
    """
    s = settings or get_settings()
    subject_directory = SqlSubjectDirectory(db, PermissionResolver(db))
    row_store = SqlRowStore(db)
    checker = RemovalEligibilityChecker(
        subject_directory,
        capability=s.admin_capability,
        denial_reason=translate(PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER, s.language),
    )
    exporter = SubjectExportOrchestrator(
        subject_directory, row_store, SqlCustomFieldResolver(db)
    )
    eraser = None
    if session_store is not None:
        eraser = SubjectErasureExecutor(
            subject_directory,
            row_store,
            session_store,
            name_template=s.erasure_name_template,
            email_template=s.erasure_email_template,
            login_token_bytes=s.erasure_login_token_bytes,
        )
    return PrivacyRequestService(
        PrivacyRequestRepository(db),
        checker,
        export_orchestrator=exporter,
        erasure_executor=eraser,
    )


async def get_session_store(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ISessionStore:
    """Live session store for the configured handler (shares the erasure transaction)."""
    return SessionStoreFactory.create_session_store(
        db, redis_client=getattr(request.app.state, "session_redis", None)
    )


async def get_privacy_request_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PrivacyRequestService:
    """Privacy request service for removal status and export (read-only session)."""
    return build_privacy_request_service(db)


async def get_privacy_request_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    session_store: Annotated[ISessionStore, Depends(get_session_store)],
) -> PrivacyRequestService:
    """Privacy request service for erasure (transactional session)."""
    return build_privacy_request_service(db, session_store=session_store)
