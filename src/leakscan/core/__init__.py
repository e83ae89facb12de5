"""Core scanning engine."""

from .patterns import Detector, BUILTIN_PATTERNS, builtin_detectors, load_detectors
from .compiler import Matcher, CompiledCatalog, compile_detectors
from .line_reader import iter_lines
from .walker import walk_files
from .results import MatchResult, ScanState
from .scanner import Scanner, scan_file

__all__ = [
    "Detector",
    "BUILTIN_PATTERNS",
    "builtin_detectors",
    "load_detectors",
    "Matcher",
    "CompiledCatalog",
    "compile_detectors",
    "iter_lines",
    "walk_files",
    "MatchResult",
    "ScanState",
    "Scanner",
    "scan_file",
]
