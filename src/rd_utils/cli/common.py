from __future__ import annotations

import json
import os
import sys
from typing import Any

from rd_utils.result import Result, error_message


def _json_dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def result_payload(result: Result) -> dict:
    """JSON-safe view of a Result (errors rendered as text)."""
    return {
        "ok": result["ok"],
        "value": result["value"],
        "error": error_message(result),
    }


def emit_json(result: Result) -> None:
    sys.stdout.write(_json_dump(result_payload(result)))
    sys.stdout.flush()


def apply_log_overrides(
    *,
    quiet: bool | None = None,
    verbose: bool | None = None,
) -> tuple[bool | None, bool | None]:
    rdu_log = (os.environ.get("RDU_LOG") or "").strip().lower()
    if rdu_log == "quiet":
        quiet = True if quiet is None else quiet
    if rdu_log == "verbose":
        verbose = True if verbose is None else verbose
    return quiet, verbose


def resolve_log_level(*, quiet: bool | None, verbose: bool | None) -> str | None:
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return None


def exit_with_message(message: str, *, code: int = 0) -> None:
    stream = sys.stderr if code else sys.stdout
    stream.write(message + os.linesep)
    stream.flush()
    raise SystemExit(code)
