"""JSON envelopes written by ``--format json``.

Both shapes share ``ok``, ``command`` and an ISO-8601 UTC ``timestamp``; a
success carries the conversion under ``data`` and a failure carries
``{"code", "message"}`` under ``error``.  Non-finite numbers are refused
because ``Infinity``/``NaN`` are not JSON.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tempconv.models.temperature import ConversionResult


def _dump(*, ok: bool, command: str, **body: Any) -> str:
    envelope = {"ok": ok, "command": command, **body}
    envelope["timestamp"] = datetime.now(UTC).isoformat()
    return json.dumps(envelope, indent=2, ensure_ascii=False, allow_nan=False)


def format_json_conversion(result: ConversionResult, *, command: str) -> str:
    """Return the success envelope for *result*."""
    return _dump(ok=True, command=command, data=result.model_dump(mode="json"))


def format_json_error(*, code: str, message: str, command: str) -> str:
    """Return the failure envelope for an error *code* and *message*."""
    return _dump(ok=False, command=command, error={"code": code, "message": message})
