"""Shared utilities (datetime, generators)."""

from subject_rights.shared.utils.datetime import ensure_utc, utc_now
from subject_rights.shared.utils.generators import generate_cuid

__all__ = ["ensure_utc", "generate_cuid", "utc_now"]
