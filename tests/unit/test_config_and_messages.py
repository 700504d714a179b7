"""Settings validation and message catalogue tests."""

import pytest
from pydantic import ValidationError

from subject_rights.core.config import Settings
from subject_rights.core.messages import (
    PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER,
    translate,
)

DB_URL = "sqlite+aiosqlite:///:memory:"


def test_defaults() -> None:
    settings = Settings(database_url=DB_URL)
    assert settings.admin_capability == "core.admin"
    assert settings.erasure_login_token_bytes == 12
    assert settings.session_handler == "database"


def test_database_url_required(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(database_url="")


def test_unknown_session_handler_rejected() -> None:
    with pytest.raises(ValidationError, match="session_handler"):
        Settings(database_url=DB_URL, session_handler="memcached")


def test_short_login_token_rejected() -> None:
    with pytest.raises(ValidationError, match="ERASURE_LOGIN_TOKEN_BYTES"):
        Settings(database_url=DB_URL, erasure_login_token_bytes=8)


def test_template_without_placeholder_rejected() -> None:
    with pytest.raises(ValidationError, match="ERASURE_EMAIL_TEMPLATE"):
        Settings(database_url=DB_URL, erasure_email_template="removed@email.invalid")


@pytest.mark.parametrize(
    "template",
    ["user{subject_id}@gmail.com", "user{subject_id}", "user{subject_id}@example.invalid.com"],
)
def test_deliverable_email_template_rejected(template: str) -> None:
    with pytest.raises(ValidationError, match="invalid domain"):
        Settings(database_url=DB_URL, erasure_email_template=template)


def test_email_template_in_invalid_domain_accepted() -> None:
    settings = Settings(database_url=DB_URL, erasure_email_template="gone{subject_id}@Example.INVALID")
    assert settings.erasure_email_template.endswith("INVALID")


def test_translate_default_language() -> None:
    assert translate(PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER) == (
        "You cannot remove a super user account."
    )


def test_translate_other_language_and_fallbacks() -> None:
    assert "Super-Benutzer" in translate(PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER, "de-DE")
    assert translate(PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER, "xx-XX") == (
        "You cannot remove a super user account."
    )
    assert translate("UNKNOWN_KEY", "en-GB") == "UNKNOWN_KEY"
