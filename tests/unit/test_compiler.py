"""Unit tests for detector compilation."""

import logging

from leakscan.core.compiler import compile_detector, compile_detectors
from leakscan.core.patterns import Detector, builtin_detectors
from leakscan.utils.exceptions import PatternError

import pytest


def test_builtin_catalog_compiles():
    catalog = compile_detectors(builtin_detectors())

    assert catalog.errors == []
    assert len(catalog) == len(builtin_detectors())


def test_accepts_mapping_and_pairs():
    from_mapping = compile_detectors({"AWS": "AKIA[0-9A-Z]{16}"})
    from_pairs = compile_detectors([("AWS", "AKIA[0-9A-Z]{16}"), ("AWS", "AKIA")])

    assert [m.label for m in from_mapping.matchers] == ["AWS"]
    assert [m.label for m in from_pairs.matchers] == ["AWS", "AWS"]


def test_invalid_pattern_is_skipped_and_reported(caplog):
    detectors = [
        ("Broken", "([a-z"),
        ("AWS", "AKIA[0-9A-Z]{16}"),
        ("Email", r"\b\w+@\w+\.com\b"),
    ]

    with caplog.at_level(logging.ERROR, logger="leakscan"):
        catalog = compile_detectors(detectors)

    assert [m.label for m in catalog.matchers] == ["AWS", "Email"]
    assert len(catalog.errors) == 1
    assert catalog.errors[0].label == "Broken"

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "Broken" in errors[0].getMessage()


def test_compile_detector_raises_pattern_error():
    with pytest.raises(PatternError) as exc_info:
        compile_detector(Detector("Bad", "*oops"))

    assert exc_info.value.label == "Bad"
    assert "*oops" in str(exc_info.value)


def test_ascii_semantics():
    matcher = compile_detector(Detector("IP", r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b"))

    assert matcher.matches("host 10.0.0.1 up")
    # Arabic-Indic digits are not \d in ASCII mode
    assert not matcher.matches("١٠.0.0.1")


def test_leading_dot_star_pattern_on_long_line():
    matcher = compile_detector(Detector("Firebase URL", r".*firebaseio\.com"))

    assert matcher.detector.pattern == r".*firebaseio\.com"
    assert matcher.matches("url: https://demo.firebaseio.com/x")
    assert not matcher.matches("x" * 200_000)


def test_non_string_pattern_is_reported(caplog):
    with caplog.at_level(logging.ERROR, logger="leakscan"):
        catalog = compile_detectors({"Numeric": 12345, "AWS": "AKIA[0-9A-Z]{16}"})

    assert [m.label for m in catalog.matchers] == ["AWS"]
    assert catalog.errors[0].label == "Numeric"
    assert "must be a string" in catalog.errors[0].message
    assert any("Numeric" in r.getMessage() for r in caplog.records)


def test_backreferences_are_rejected():
    with pytest.raises(PatternError):
        compile_detector(Detector("Repeat", r"(a)\1"))


def test_backspace_delimited_url_pattern_is_literal():
    url = next(d for d in builtin_detectors() if d.label == "URL:")
    matcher = compile_detector(url)

    assert url.pattern.startswith("\x08")
    assert not matcher.matches("see https://example.com/path for details")
    assert matcher.matches("\x08https://example.com\x08")
