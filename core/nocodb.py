# =============================================================================
# core/nocodb.py  —  NocoDB Records Fetch (the whole round trip)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One GET against the NocoDB v2 records endpoint:
#
#     GET {base}/api/v2/tables/{table_id}/records?limit=&offset=&shuffle=
#         accept:   application/json
#         xc-token: <api token>
#
#   and turns whatever happens into a FetchResult.  fetch_records() never
#   raises: a missing token, a non-2xx status, a dead socket or a garbage
#   body all come back as FetchResult.failed("...").
#
# RESPONSE SHAPES:
#   NocoDB has returned the page under "list" in some versions and under
#   "rows" in others.  RECORD_EXTRACTORS holds one small function per known
#   shape, tried in order.  Supporting a new shape = appending one function.
#
# LOGGING:
#   Every line starts with "[nocodb]" and goes to stderr via the root
#   logger (see tools/mcp_server.py).  Error bodies are logged in full but
#   never returned to the caller.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from core.config import NocoDBSettings
from core.models import FetchParams, FetchResult, RecordEnvelope


MISSING_TOKEN_MESSAGE = "Missing API token. Provide token or set NOCODB_TOKEN."

RecordExtractor = Callable[[Any], Optional[list]]


# =============================================================================
# Credential + URL
# =============================================================================
def resolve_token(explicit: Optional[str], settings: NocoDBSettings) -> Optional[str]:
    """Per-call token first, then the one configured at startup."""
    return explicit or settings.token or None


def build_records_url(settings: NocoDBSettings, params: FetchParams) -> str:
    path = f"/api/v2/tables/{urllib.parse.quote(settings.table_id, safe='')}/records"
    url = urllib.parse.urljoin(settings.base_url, path)
    return f"{url}?{urllib.parse.urlencode(params.query())}"


# =============================================================================
# Response shape extraction
# =============================================================================
def _field_array(name: str) -> RecordExtractor:
    def extract(body: Any) -> Optional[list]:
        if not isinstance(body, dict):
            return None
        value = body.get(name)
        return value if isinstance(value, list) else None

    extract.__name__ = f"extract_{name}"
    return extract


# Order matters: first match wins.
RECORD_EXTRACTORS: tuple[RecordExtractor, ...] = (
    _field_array("list"),
    _field_array("rows"),
)


def extract_records(
    body: Any, extractors: tuple[RecordExtractor, ...] = RECORD_EXTRACTORS
) -> list:
    for extractor in extractors:
        records = extractor(body)
        if records is not None:
            return records
    return []


# =============================================================================
# PUBLIC API: fetch_records
# =============================================================================
def fetch_records(params: FetchParams, settings: NocoDBSettings) -> FetchResult:
    """Fetch one page of records and log what came back.

    Args:
        params: Validated pagination/shuffle values plus optional token.
        settings: Startup configuration (base URL, table, fallback token).

    Returns:
        FetchResult.ok(envelope) on a 2xx JSON response, otherwise
        FetchResult.failed(text) where text is one of:
          - the missing-token message (no request is made)
          - "Request failed: <code> <reason>"
          - "Error: <exception>"
    """
    api_token = resolve_token(params.token, settings)
    if not api_token:
        return FetchResult.failed(MISSING_TOKEN_MESSAGE)

    try:
        url = build_records_url(settings, params)
        request = urllib.request.Request(
            url,
            headers={"accept": "application/json", "xc-token": api_token},
        )
        open_kwargs = {} if settings.timeout is None else {"timeout": settings.timeout}

        try:
            with urllib.request.urlopen(request, **open_kwargs) as response:
                body_text = response.read().decode("utf-8", errors="replace")
                status, reason = response.status, response.reason
        except urllib.error.HTTPError as e:
            # 4xx/5xx: urllib raises, but the error object still carries the body.
            body_text = e.read().decode("utf-8", errors="replace")
            status, reason = e.code, e.reason

        if not 200 <= status < 300:
            logging.error(f"[nocodb] HTTP {status} {reason}\n{body_text}")
            return FetchResult.failed(f"Request failed: {status} {reason}")

        records = extract_records(json.loads(body_text))
        logging.info(f"[nocodb] fetched {len(records)} records from {settings.table_id}")
        for record in records:
            line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
            logging.info(f"[nocodb] record: {line[:settings.record_log_chars]}")

        return FetchResult.ok(RecordEnvelope(records=records))
    except Exception as e:
        logging.error(f"[nocodb] error: {e}")
        return FetchResult.failed(f"Error: {e}")
