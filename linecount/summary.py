"""Results box printed after a count."""

from __future__ import annotations

from .file_tree_model import Measurement
from .ui_theme import DEFAULT_THEME, UITheme

SUMMARY_INNER_WIDTH = 51

_BYTE_UNITS = (
    (1_000_000_000, "GB"),
    (1_000_000, "MB"),
    (1_000, "KB"),
)


def format_byte_count(byte_count: int) -> str:
    """Format ``byte_count`` in decimal GB/MB/KB, or plain bytes below 1 KB."""
    for scale, unit in _BYTE_UNITS:
        if byte_count >= scale:
            return f"{byte_count / scale:.2f} {unit}"
    return f"{byte_count} B"


def format_results(
    measurement: Measurement,
    elapsed_seconds: float,
    *,
    show_bytes: bool = True,
    theme: UITheme | None = None,
) -> str:
    """Return the boxed lines/bytes/time summary, newline terminated."""
    active_theme = theme or DEFAULT_THEME
    border = active_theme.summary_border
    reset = active_theme.reset

    rows = [f"Lines       :{measurement.lines}"]
    if show_bytes:
        rows.append(f"Bytes       :{format_byte_count(measurement.bytes)}")
    rows.append(f"Time Taken  :{elapsed_seconds:.5f} Seconds")

    rule = "─" * SUMMARY_INNER_WIDTH
    out = [f"{border}╭{rule}╮{reset}"]
    for row in rows:
        out.append(f"{border}│{reset}{row:<{SUMMARY_INNER_WIDTH}}{border}│{reset}")
    out.append(f"{border}╰{rule}╯{reset}")
    return "\n".join(out) + "\n"


__all__ = [
    "SUMMARY_INNER_WIDTH",
    "format_byte_count",
    "format_results",
]
