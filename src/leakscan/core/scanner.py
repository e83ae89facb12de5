"""Scan orchestrator: compile detectors, walk the target, collect matches."""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .compiler import CompiledCatalog, Matcher, compile_detectors
from .line_reader import iter_lines
from .patterns import DetectorSource, load_detectors
from .results import MatchResult, ScanState
from .walker import walk_files
from ..utils.config import Config
from ..utils.exceptions import FileAccessError, InvalidTargetError
from ..utils.logger import PerformanceLogger, get_findings_logger, get_logger

logger = get_logger(__name__)
findings_logger = get_findings_logger()


@dataclass
class FileScan:
    """Outcome of scanning one file."""

    path: str
    results: List[MatchResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    lines: int = 0
    completed: bool = False


def scan_file(path: str, matchers: Sequence[Matcher]) -> FileScan:
    """
    Apply every matcher to every line of ``path``.

    Open and read failures end the file's scan and are recorded on the
    returned FileScan; matches found before a read failure are kept. A
    failure to build the absolute path drops only that match.
    """
    outcome = FileScan(path=path)

    try:
        with open(path, "rb") as handle:
            for line_number, text in iter_lines(handle):
                outcome.lines = line_number
                for matcher in matchers:
                    if not matcher.matches(text):
                        continue

                    findings_logger.info(f"{matcher.label} found, FILE: {path}, LINE: {line_number}")

                    try:
                        abs_path = os.path.abspath(path)
                    except OSError as e:
                        message = f"File path error: {path}: {e}"
                        logger.error(message)
                        outcome.errors.append(message)
                        continue

                    outcome.results.append(
                        MatchResult(pattern=matcher.label, file_path=abs_path, line=line_number)
                    )
    except OSError as e:
        error = FileAccessError(path, e)
        logger.error(error.message)
        outcome.errors.append(error.message)
        return outcome

    outcome.completed = True
    return outcome


class Scanner:
    """Runs the INIT and SCAN phases and returns the populated ScanState."""

    def __init__(
        self,
        config: Optional[Config] = None,
        detectors: Optional[DetectorSource] = None,
        patterns_file: Optional[Path] = None,
    ):
        """
        Initialize scanner.

        Args:
            config: Configuration object (uses default if None)
            detectors: Explicit detector catalog; overrides configured patterns
            patterns_file: Extra YAML detectors added to the configured ones
        """
        self.config = config or Config()
        if detectors is None:
            detectors = load_detectors(self.config, patterns_file)
        self.detectors = detectors

    def compile(self) -> CompiledCatalog:
        return compile_detectors(self.detectors)

    def scan(
        self,
        target: Union[str, Path],
        workers: Optional[int] = None,
    ) -> ScanState:
        """
        Scan a directory tree (or a single file).

        Args:
            target: Scan root
            workers: Files scanned in parallel; defaults to ``scan.workers``

        Returns:
            ScanState with results in walk order

        Raises:
            InvalidTargetError: If the target does not exist
        """
        root = os.fspath(target)
        if not os.path.lexists(root):
            raise InvalidTargetError(
                f"Target does not exist: {root}",
                suggestion="Pass an existing directory or file",
            )

        workers = workers or self.config.scan.workers
        state = ScanState(target=root)
        logger.info(f"Starting scan of {root}")

        with PerformanceLogger(logger, "compile detectors"):
            catalog = self.compile()
        state.detectors_loaded = len(catalog.matchers)
        state.pattern_errors = len(catalog.errors)
        for error in catalog.errors:
            state.add_error(error.message)

        def on_walk_error(path: str, error: Exception) -> None:
            message = f"Skipping {path}: {error}"
            logger.warning(message)
            state.add_error(message)

        with PerformanceLogger(logger, f"scan {root}"):
            files = walk_files(root, on_error=on_walk_error)
            if workers > 1:
                with ThreadPoolExecutor(max_workers=workers) as executor:
                    for outcome in executor.map(lambda p: scan_file(p, catalog.matchers), files):
                        self._merge(state, outcome)
            else:
                for path in files:
                    self._merge(state, scan_file(path, catalog.matchers))

        state.finish()
        logger.info(
            f"Scanned {state.files_scanned} files, "
            f"found {state.total_matches} matches, "
            f"{len(state.errors)} errors"
        )
        return state

    def _merge(self, state: ScanState, outcome: FileScan) -> None:
        for result in outcome.results:
            state.add_result(result)
        for message in outcome.errors:
            state.add_error(message)
        state.lines_scanned += outcome.lines
        if outcome.completed:
            state.files_scanned += 1
