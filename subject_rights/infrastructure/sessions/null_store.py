"""Null session store for hosts without a live session backend."""


class NullSessionStore:
    """No live sessions are kept; destroy always succeeds."""

    handler = "none"

    async def destroy(self, session_id: str) -> bool:
        return True
