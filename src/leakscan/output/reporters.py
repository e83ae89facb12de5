"""Render scan results to txt, json, or html report files."""

import html
import json
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union

from ..core.results import MatchResult, ScanState
from ..utils.exceptions import ReportError, UnsupportedFormatError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def render_txt(results: Iterable[MatchResult]) -> str:
    """One ``<label>: <path>, Line: <n>`` line per result."""
    return "".join(f"{r.pattern}: {r.file_path}, Line: {r.line}\n" for r in results)


def render_json(results: Iterable[MatchResult]) -> str:
    """JSON array of ``{pattern, file_path, line}`` objects."""
    return json.dumps([r.to_dict() for r in results], indent=2) + "\n"


def render_html(results: Iterable[MatchResult]) -> str:
    """Unordered list with escaped labels and ``file://`` links."""
    parts = ["<html><body><ul>\n"]
    for r in results:
        label = html.escape(r.pattern)
        path = html.escape(r.file_path)
        href = html.escape(f"file://{r.file_path}")
        parts.append(f'<li>{label}: <a href="{href}">{path}</a>, Line: {r.line}</li>\n')
    parts.append("</ul></body></html>\n")
    return "".join(parts)


REPORTERS: Dict[str, Callable[[Iterable[MatchResult]], str]] = {
    "txt": render_txt,
    "json": render_json,
    "html": render_html,
}

SUPPORTED_FORMATS = tuple(REPORTERS)


def normalize_format(output_format: str) -> str:
    """
    Validate an output format selector.

    Raises:
        UnsupportedFormatError: If no reporter exists for the format
    """
    fmt = (output_format or "").strip().lower()
    if fmt not in REPORTERS:
        raise UnsupportedFormatError(
            f"Unsupported output format: {output_format!r}",
            suggestion=f"Choose one of: {', '.join(SUPPORTED_FORMATS)}",
        )
    return fmt


def report_basename(target: Union[str, Path]) -> str:
    """
    Base name of the scan root, ignoring trailing separators.

    ``.``/``..`` and the filesystem root fall back to the resolved
    directory name, then to ``root``.
    """
    raw = os.fspath(target)
    stripped = raw.rstrip("/" + os.sep) or raw
    name = os.path.basename(stripped)
    if name in ("", ".", ".."):
        name = os.path.basename(os.path.abspath(raw)) or "root"
    return name


def output_path(
    target: Union[str, Path],
    output_format: str,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """Path of the report file: ``<directory>/<base-name-of-root>.<format>``."""
    fmt = normalize_format(output_format)
    directory = Path(directory) if directory else Path.cwd()
    return directory / f"{report_basename(target)}.{fmt}"


def write_report(
    state: ScanState,
    output_format: str,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Render ``state`` once and write the report file.

    Args:
        state: Finished scan
        output_format: One of ``txt``, ``json``, ``html``
        directory: Where to write; defaults to the current directory

    Returns:
        Path of the written report

    Raises:
        UnsupportedFormatError: If the format is unknown
        ReportError: If the file cannot be created or written
    """
    fmt = normalize_format(output_format)
    path = output_path(state.target, fmt, directory)
    content = REPORTERS[fmt](state.results)

    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as f:
            f.write(content)
    except OSError as e:
        raise ReportError(
            f"File creation error: {path}",
            details={"error": str(e)},
        ) from e

    logger.info(f"{fmt.upper()} report saved to {path} ({state.total_matches} results)")
    return path
