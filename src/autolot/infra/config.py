from __future__ import annotations

import os

DEFAULT_REVALIDATE_TIMEOUT_SECONDS = 5.0


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def revalidate_webhook_url() -> str | None:
    """Frontend endpoint that purges cached pages; None disables the webhook."""
    return os.getenv("REVALIDATE_WEBHOOK_URL") or None


def revalidate_webhook_token() -> str | None:
    return os.getenv("REVALIDATE_WEBHOOK_TOKEN") or None


def revalidate_timeout_seconds() -> float:
    raw = os.getenv("REVALIDATE_TIMEOUT_SECONDS")

    if not raw:
        return DEFAULT_REVALIDATE_TIMEOUT_SECONDS

    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"REVALIDATE_TIMEOUT_SECONDS must be a number, got {raw!r}")
