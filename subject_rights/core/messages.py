"""Localized user-facing messages.

Keys are stable identifiers; translate() resolves them for a language
tag and falls back to en-GB, then to the key itself.
"""

DEFAULT_LANGUAGE = "en-GB"

PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER = "PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER"

_CATALOGUE: dict[str, dict[str, str]] = {
    "en-GB": {
        PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER: "You cannot remove a super user account.",
    },
    "de-DE": {
        PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER: "Ein Super-Benutzer-Konto kann nicht entfernt werden.",
    },
    "fr-FR": {
        PRIVACY_USER_ERROR_CANNOT_REMOVE_SUPER_USER: "Vous ne pouvez pas supprimer un compte super utilisateur.",
    },
}


def translate(key: str, language: str | None = None) -> str:
    """Return the message for key in language (fallback: en-GB, then the key)."""
    lang = language or DEFAULT_LANGUAGE
    message = _CATALOGUE.get(lang, {}).get(key)
    if message is None:
        message = _CATALOGUE[DEFAULT_LANGUAGE].get(key, key)
    return message
