"""Report writers."""

from .reporters import (
    REPORTERS,
    SUPPORTED_FORMATS,
    output_path,
    render_html,
    render_json,
    render_txt,
    write_report,
)

__all__ = [
    "REPORTERS",
    "SUPPORTED_FORMATS",
    "output_path",
    "render_html",
    "render_json",
    "render_txt",
    "write_report",
]
