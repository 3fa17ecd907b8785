"""Configuration classes for the Flask application."""

from __future__ import annotations

import os
import secrets


def _load_secret() -> str:
    """Return the Flask secret key for the current process."""

    secret = os.environ.get("TRAVEL_PACE_SECRET")
    if secret:
        return secret
    # Generate an unpredictable per-process key for local development.
    return secrets.token_urlsafe(64)


class BaseConfig:
    SECRET_KEY = _load_secret()
    MAX_CONTENT_LENGTH = 64 * 1024  # JSON payloads only
    JSON_SORT_KEYS = False
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Strict"
    # Overrides ``plugins.travel_pace.settings_file`` from config.yml.
    TRAVEL_PACE_SETTINGS_FILE = os.environ.get("TRAVEL_PACE_SETTINGS_FILE")
    TRAVEL_PACE_PERSIST_SETTINGS = True
    RESPONSE_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "object-src 'none'; "
            "frame-ancestors 'none'"
        ),
        "Referrer-Policy": "no-referrer",
    }


class TestingConfig(BaseConfig):
    TESTING = True
    TRAVEL_PACE_PERSIST_SETTINGS = False


__all__ = ["BaseConfig", "TestingConfig"]
