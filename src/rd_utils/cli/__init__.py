from .common import (
    apply_log_overrides,
    emit_json,
    exit_with_message,
    resolve_log_level,
    result_payload,
)

from .handlers import (
    handle_cash,
    handle_custom,
    handle_format,
    handle_validate,
)

__all__ = [
    "apply_log_overrides",
    "emit_json",
    "exit_with_message",
    "resolve_log_level",
    "result_payload",
    "handle_cash",
    "handle_custom",
    "handle_format",
    "handle_validate",
]
