"""Unit tests for report rendering and writing."""

import json
import os
from pathlib import Path

import pytest

from leakscan.core.results import MatchResult, ScanState
from leakscan.output.reporters import (
    output_path,
    render_html,
    render_json,
    render_txt,
    report_basename,
    write_report,
)
from leakscan.utils.exceptions import ReportError, UnsupportedFormatError


@pytest.fixture
def results():
    return [
        MatchResult("Amazon AWS Access Key ID", "/repo/a.txt", 3),
        MatchResult("E-Mail", "/repo/docs/<team>&co.md", 12),
    ]


def test_render_txt(results):
    assert render_txt(results) == (
        "Amazon AWS Access Key ID: /repo/a.txt, Line: 3\n"
        "E-Mail: /repo/docs/<team>&co.md, Line: 12\n"
    )


def test_render_txt_empty():
    assert render_txt([]) == ""


def test_render_json_fields(results):
    data = json.loads(render_json(results))

    assert data == [
        {"pattern": "Amazon AWS Access Key ID", "file_path": "/repo/a.txt", "line": 3},
        {"pattern": "E-Mail", "file_path": "/repo/docs/<team>&co.md", "line": 12},
    ]


def test_render_json_empty_is_list():
    assert json.loads(render_json([])) == []


def test_render_html_escapes(results):
    page = render_html([MatchResult('<b>"Key"</b>', "/repo/x&y.txt", 7)])

    assert page.startswith("<html><body><ul>\n")
    assert page.endswith("</ul></body></html>\n")
    assert "<b>" not in page
    assert "&lt;b&gt;&quot;Key&quot;&lt;/b&gt;" in page
    assert '<a href="file:///repo/x&amp;y.txt">/repo/x&amp;y.txt</a>, Line: 7</li>' in page


def test_render_html_empty():
    assert render_html([]) == "<html><body><ul>\n</ul></body></html>\n"


@pytest.mark.parametrize(
    "target, expected",
    [
        ("/data/project", "project"),
        ("/data/project/", "project"),
        ("project", "project"),
        ("/data/notes.txt", "notes.txt"),
    ],
)
def test_report_basename(target, expected):
    assert report_basename(target) == expected


def test_report_basename_dot_uses_cwd(tmp_path, monkeypatch):
    workdir = tmp_path / "checkout"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert report_basename(".") == "checkout"
    assert report_basename("/") == "root"


def test_output_path_defaults_to_cwd():
    assert output_path("/data/project", "json") == Path.cwd() / "project.json"


def test_write_report_txt(tmp_path):
    state = ScanState(target=str(tmp_path / "src"))
    state.add_result(MatchResult("Amazon AWS Access Key ID", "/abs/a.txt", 3))

    path = write_report(state, "txt")

    assert path == Path.cwd() / "src.txt"
    assert path.read_text() == "Amazon AWS Access Key ID: /abs/a.txt, Line: 3\n"


def test_write_report_json_round_trip(tmp_path, results):
    state = ScanState(target="proj")
    for result in results:
        state.add_result(result)

    path = write_report(state, "JSON", tmp_path)

    assert path == tmp_path / "proj.json"
    loaded = json.loads(path.read_text())
    assert [(d["pattern"], d["file_path"], d["line"]) for d in loaded] == [
        (r.pattern, r.file_path, r.line) for r in results
    ]


def test_write_report_unsupported_format():
    state = ScanState(target="proj")

    with pytest.raises(UnsupportedFormatError, match="pdf"):
        write_report(state, "pdf")

    assert not os.path.exists("proj.pdf")


def test_write_report_unwritable_directory(tmp_path):
    state = ScanState(target="proj")

    with pytest.raises(ReportError, match="File creation error"):
        write_report(state, "txt", tmp_path / "missing" / "dir")
