"""Process one privacy request from the command line.

Usage:
    python -m scripts.process_privacy_request status REQUEST_ID
    python -m scripts.process_privacy_request export REQUEST_ID
    python -m scripts.process_privacy_request erase REQUEST_ID

status prints whether the request's data may be removed; export prints the
ordered export domains as JSON; erase pseudonymizes the subject and ends its
sessions. Each command runs in its own transaction.
Requires DATABASE_URL (and the Redis settings when SESSION_HANDLER=redis).
"""

import asyncio
import json
import sys

import redis.asyncio as redis

import subject_rights.infrastructure.persistence.database as database
from subject_rights.api.v1.dependencies import build_privacy_request_service
from subject_rights.core.config import get_settings
from subject_rights.domain.exceptions import SubjectRightsException
from subject_rights.infrastructure.sessions import SessionStoreFactory
from subject_rights.schemas.privacy import ExportRequestResponse
from subject_rights.shared.telemetry.logging import setup_logging

COMMANDS = ("status", "export", "erase")


def _redis_client() -> redis.Redis | None:
    settings = get_settings()
    if settings.session_handler != "redis":
        return None
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        decode_responses=True,
    )


async def run(command: str, request_id: int) -> int:
    """Run command for request_id; return the process exit code."""
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        return 1
    redis_client = _redis_client() if command == "erase" else None
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                session_store = None
                if command == "erase":
                    session_store = SessionStoreFactory.create_session_store(
                        session, redis_client=redis_client
                    )
                service = build_privacy_request_service(session, session_store=session_store)
                if command == "status":
                    status = await service.can_remove_data(request_id)
                    print(json.dumps({"can_remove": status.can_remove, "reason": status.reason}))
                elif command == "export":
                    result = await service.export_request(request_id)
                    print(ExportRequestResponse.from_result(result).model_dump_json(indent=2))
                else:
                    await service.remove_data(request_id)
                    print(f"Request {request_id}: subject data removed")
    except SubjectRightsException as e:
        print(json.dumps(e.to_dict(), default=str), file=sys.stderr)
        return 2
    finally:
        if redis_client is not None:
            await redis_client.aclose()
        await database.dispose_engine()
    return 0


def main() -> None:
    if len(sys.argv) != 3 or sys.argv[1] not in COMMANDS or not sys.argv[2].isdigit():
        print(__doc__, file=sys.stderr)
        sys.exit(1)
    setup_logging(stream=sys.stderr)
    sys.exit(asyncio.run(run(sys.argv[1], int(sys.argv[2]))))


if __name__ == "__main__":
    main()
