# lowpoly/utils.py
from __future__ import annotations

"""
Shared utilities for lowpoly.

Time formatting, pretty key/value formatting, and tidy print-based logging
used by the processor and the CLI.
"""

import io
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterable, Iterator, List, Optional, TextIO, Tuple

# Per-context override for log output; None means sys.stdout.
_LOG_STREAM: ContextVar[Optional[TextIO]] = ContextVar("lowpoly_log_stream", default=None)


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Pretty formatting


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, bool):
        return format_bool_on_off(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by sep."""
    out: List[str] = []
    for name, value in pairs:
        out.append(f"{name}{eq}{format_number_compact(value)}")
    return sep.join(out)


#  CLI / logging


def enable_line_buffered_stdout() -> None:
    """Enable line-buffered stdout when the stream supports .reconfigure()."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [grid] Source: 100x80  Output: 96x64  Tile: 32  Tiles: 6
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def _log_stream() -> TextIO:
    return _LOG_STREAM.get() or sys.stdout


@contextmanager
def captured_log() -> Iterator[io.StringIO]:
    """
    Collect log/debug/warn/error/banner output of the current thread in a buffer.
    Unlike redirect_stdout this leaves sys.stdout alone, so worker threads
    can each capture their own file's output.
    """
    buf = io.StringIO()
    token = _LOG_STREAM.set(buf)
    try:
        yield buf
    finally:
        _LOG_STREAM.reset(token)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", file=_log_stream(), flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, file=_log_stream(), flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=_log_stream(), flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=_log_stream(), flush=True)


def error(message: str) -> None:
    """Error log line to stderr, or to the captured stream inside captured_log()."""
    print(f"[error] {message}", file=_LOG_STREAM.get() or sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_total_duration_compact",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "enable_line_buffered_stdout",
    "captured_log",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
