"""Match results and the run-scoped state that accumulates them."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MatchResult:
    """One detector hit on one line of one file. Never carries line content."""

    pattern: str
    file_path: str
    line: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern,
            "file_path": self.file_path,
            "line": self.line,
        }


@dataclass
class ScanState:
    """Everything one scan produced, in discovery order."""

    target: str
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    duration_seconds: float = 0.0

    results: List[MatchResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    files_scanned: int = 0
    lines_scanned: int = 0
    detectors_loaded: int = 0
    pattern_errors: int = 0

    def add_result(self, result: MatchResult) -> None:
        self.results.append(result)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def finish(self) -> None:
        self.completed_at = datetime.now()
        self.duration_seconds = (self.completed_at - self.started_at).total_seconds()

    @property
    def total_matches(self) -> int:
        return len(self.results)

    @property
    def matches_by_pattern(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for result in self.results:
            counts[result.pattern] = counts.get(result.pattern, 0) + 1
        return counts

    def matches_for(self, file_path: str) -> List[MatchResult]:
        return [r for r in self.results if r.file_path == file_path]

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.results]
