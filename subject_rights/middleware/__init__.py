"""ASGI middleware."""

from subject_rights.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
