from __future__ import annotations

from fastapi import Header, HTTPException, status

from app.core.config import settings


def _normalize_lang(lang: str | None) -> str:
    if not lang:
        return "en"
    return lang.split(",")[0].strip().lower()


def _auth_error_message(lang: str | None) -> str:
    key = _normalize_lang(lang)
    messages = {
        "en": "Please provide a valid API key to use the resume analyzer.",
        "de": "Bitte gib einen gültigen API-Schlüssel an, um den Lebenslauf-Analyzer zu nutzen.",
        "fr": "Veuillez fournir une clé API valide pour utiliser l'analyseur de CV.",
        "es": "Por favor, proporciona una clave API válida para usar el analizador de currículums.",
    }
    return messages.get(key, messages["en"])


def check_api_key(x_api_key: str | None, lang: str | None = None) -> None:
    # Without a configured key every request passes through unauthenticated.
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_auth_error_message(lang),
        )


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    accept_language: str | None = Header(default=None, alias="Accept-Language"),
) -> None:
    check_api_key(x_api_key, accept_language)
