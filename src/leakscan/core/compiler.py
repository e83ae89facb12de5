"""Compile detector patterns once per run."""

from dataclasses import dataclass, field
from typing import List

import re2

from .patterns import Detector, DetectorSource, as_detectors
from ..utils.exceptions import PatternError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def regex_options() -> "re2.Options":
    """RE2 options shared by every detector."""
    options = re2.Options()
    # Compile errors are raised and logged by us, not printed by RE2.
    options.log_errors = False
    return options


@dataclass(frozen=True)
class Matcher:
    """Compiled form of a detector."""

    detector: Detector
    regex: "re2._Regexp"

    @property
    def label(self) -> str:
        return self.detector.label

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass
class CompiledCatalog:
    """Matchers that compiled, plus the detectors that did not."""

    matchers: List[Matcher] = field(default_factory=list)
    errors: List[PatternError] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.matchers)


def compile_detector(detector: Detector) -> Matcher:
    """
    Compile a single detector with RE2.

    RE2 matches in time linear in the line length and uses ASCII
    semantics for \\d, \\w, \\s and \\b.

    Raises:
        PatternError: If the pattern is not a string or not a valid
            regular expression
    """
    if not isinstance(detector.pattern, str):
        raise PatternError(
            detector.label,
            detector.pattern,
            TypeError(f"pattern must be a string, got {type(detector.pattern).__name__}"),
        )

    try:
        regex = re2.compile(detector.pattern, regex_options())
    except re2.error as e:
        raise PatternError(detector.label, detector.pattern, e) from e
    return Matcher(detector=detector, regex=regex)


def compile_detectors(detectors: DetectorSource) -> CompiledCatalog:
    """
    Compile every detector, skipping the ones with invalid patterns.

    A bad pattern is logged and recorded on the returned catalog; it never
    stops the other detectors from compiling.

    Args:
        detectors: Mapping of label to pattern, pairs, or Detector objects

    Returns:
        CompiledCatalog with matchers in catalog order
    """
    catalog = CompiledCatalog()

    for detector in as_detectors(detectors):
        try:
            catalog.matchers.append(compile_detector(detector))
        except PatternError as e:
            logger.error(e.message)
            catalog.errors.append(e)

    logger.debug(
        f"Compiled {len(catalog.matchers)} detectors "
        f"({len(catalog.errors)} skipped)"
    )
    return catalog
