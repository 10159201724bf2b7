# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of the data that flows through one
# nocodb-fetch call.  Everything here is request-scoped: built when a call
# comes in, thrown away when the response goes out.
#
#   FetchParams     →  what the caller asked for (pagination + shuffle + token)
#   RecordEnvelope  →  what we hand back on success ({count, records})
#   FetchResult     →  success payload OR error description, never both
#
# The tools/ layer only ever sees a FetchResult.  It calls to_text() and
# ships the string over MCP; it never inspects exceptions or HTTP codes.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any, Optional


DEFAULT_LIMIT = 25
MAX_LIMIT = 1000


# -----------------------------------------------------------------------------
# FetchParams — one page request
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchParams:
    """Pagination / shuffle parameters for a single records request.

    Range checks (limit 1..1000, offset >= 0, shuffle 0..1) happen at the
    MCP boundary, so by the time a FetchParams exists the values are valid.
    """

    limit: int = DEFAULT_LIMIT
    offset: int = 0               # 0-based row to start from
    shuffle: int = 0              # 1 = random order, 0 = stored order
    token: Optional[str] = None   # Explicit credential; overrides NOCODB_TOKEN

    def query(self) -> list[tuple[str, str]]:
        """Query parameters in wire order, stringified."""
        return [
            ("limit", str(self.limit)),
            ("offset", str(self.offset)),
            ("shuffle", str(self.shuffle)),
        ]

    def __repr__(self) -> str:
        # Keep tokens out of logs and tracebacks.
        masked = "***" if self.token else None
        return (
            f"FetchParams(limit={self.limit}, offset={self.offset}, "
            f"shuffle={self.shuffle}, token={masked!r})"
        )


# -----------------------------------------------------------------------------
# RecordEnvelope — the success payload
# -----------------------------------------------------------------------------
# count is derived, not stored, so it can never drift from len(records).
# -----------------------------------------------------------------------------
@dataclass
class RecordEnvelope:
    records: list[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict:
        return {"count": self.count, "records": self.records}


# -----------------------------------------------------------------------------
# FetchResult — success or error, decided once by the handler
# -----------------------------------------------------------------------------
@dataclass
class FetchResult:
    """Outcome of a fetch: exactly one of `envelope` / `error` is set."""

    envelope: Optional[RecordEnvelope] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, envelope: RecordEnvelope) -> "FetchResult":
        return cls(envelope=envelope)

    @classmethod
    def failed(cls, message: str) -> "FetchResult":
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_text(self) -> str:
        """Serialize for the caller: plain error string or indented JSON."""
        if self.error is not None:
            return self.error
        return json.dumps(self.envelope.to_dict(), indent=2, ensure_ascii=False)
