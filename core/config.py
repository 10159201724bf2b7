# =============================================================================
# core/config.py  —  Settings, read ONCE at startup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns environment variables into a frozen NocoDBSettings object.  The
#   server is built with that object and hands it to every tool call, so
#   nothing reads os.environ while a request is in flight.
#
# ENVIRONMENT VARIABLES:
#   NOCODB_TOKEN             → fallback API token (a per-call token wins)
#   NOCODB_BASE_URL          → NocoDB server address
#   NOCODB_TABLE_ID          → table whose records we read
#   NOCODB_LOG_RECORD_CHARS  → max chars of each record written to the log
#   NOCODB_TIMEOUT           → socket timeout in seconds (unset = none)
#
#   main.py calls load_dotenv() first, so any of these can live in .env.
#   Empty values are treated the same as unset.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_BASE_URL = "http://52.18.93.49:8080"
DEFAULT_TABLE_ID = "m3jxshm3jce0b2v"
DEFAULT_RECORD_LOG_CHARS = 2000


@dataclass(frozen=True)
class NocoDBSettings:
    token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    table_id: str = DEFAULT_TABLE_ID
    record_log_chars: int = DEFAULT_RECORD_LOG_CHARS
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        masked = "***" if self.token else None
        return (
            f"NocoDBSettings(token={masked!r}, base_url={self.base_url!r}, "
            f"table_id={self.table_id!r}, record_log_chars={self.record_log_chars}, "
            f"timeout={self.timeout!r})"
        )


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> NocoDBSettings:
    """Build settings from the environment (defaults to os.environ).

    Raises:
        ValueError: if NOCODB_LOG_RECORD_CHARS or NOCODB_TIMEOUT is not a
            number.  Bad configuration should stop the server at startup,
            not surface later as a per-request error.
    """
    if environ is None:
        environ = os.environ

    record_log_chars = DEFAULT_RECORD_LOG_CHARS
    raw_chars = _get(environ, "NOCODB_LOG_RECORD_CHARS")
    if raw_chars is not None:
        try:
            record_log_chars = int(raw_chars)
        except ValueError:
            raise ValueError(
                f"NOCODB_LOG_RECORD_CHARS must be an integer, got {raw_chars!r}"
            ) from None

    timeout = None
    raw_timeout = _get(environ, "NOCODB_TIMEOUT")
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"NOCODB_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

    return NocoDBSettings(
        token=_get(environ, "NOCODB_TOKEN"),
        base_url=_get(environ, "NOCODB_BASE_URL") or DEFAULT_BASE_URL,
        table_id=_get(environ, "NOCODB_TABLE_ID") or DEFAULT_TABLE_ID,
        record_log_chars=record_log_chars,
        timeout=timeout,
    )
