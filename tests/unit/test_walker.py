"""Unit tests for directory traversal."""

import os

import pytest

from leakscan.core.walker import walk_files


def _collect(root):
    errors = []
    files = list(walk_files(str(root), on_error=lambda p, e: errors.append((p, e))))
    return files, errors


def test_lexical_depth_first_order(tmp_path):
    for rel in ["b.txt", "a/z.txt", "a/b/c.txt", "c.txt", "A.txt"]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x")

    files, errors = _collect(tmp_path)

    rel = [os.path.relpath(f, tmp_path) for f in files]
    assert rel == [
        "A.txt",
        os.path.join("a", "b", "c.txt"),
        os.path.join("a", "z.txt"),
        "b.txt",
        "c.txt",
    ]
    assert errors == []


def test_directories_are_not_yielded(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "f").write_text("x")

    files, _ = _collect(tmp_path)

    assert files == [os.path.join(str(tmp_path), "f")]


def test_single_file_root(tmp_path):
    target = tmp_path / "only.txt"
    target.write_text("x")

    files, errors = _collect(target)

    assert files == [str(target)]
    assert errors == []


def test_relative_root_gives_relative_paths(tmp_path, monkeypatch):
    (tmp_path / "tree").mkdir()
    (tmp_path / "tree" / "f.txt").write_text("x")
    monkeypatch.chdir(tmp_path)

    files, _ = _collect("tree")

    assert files == [os.path.join("tree", "f.txt")]


def test_deterministic(project):
    assert _collect(project) == _collect(project)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks(tmp_path):
    real_dir = tmp_path / "real"
    real_dir.mkdir()
    (real_dir / "inner.txt").write_text("x")
    root = tmp_path / "root"
    root.mkdir()
    (root / "file.txt").write_text("x")
    os.symlink(real_dir, root / "dirlink")
    os.symlink(root / "file.txt", root / "filelink")
    os.symlink(tmp_path / "missing", root / "dangling")

    files, errors = _collect(root)

    names = [os.path.basename(f) for f in files]
    assert names == ["file.txt", "filelink"]
    skipped = sorted(os.path.basename(p) for p, _ in errors)
    assert skipped == ["dangling", "dirlink"]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="fifos unsupported")
def test_fifo_is_skipped(tmp_path):
    os.mkfifo(tmp_path / "pipe")
    (tmp_path / "ok.txt").write_text("x")

    files, errors = _collect(tmp_path)

    assert [os.path.basename(f) for f in files] == ["ok.txt"]
    assert [os.path.basename(p) for p, _ in errors] == ["pipe"]


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unlistable_directory_is_reported(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("x")
    (tmp_path / "open.txt").write_text("x")
    locked.chmod(0)

    try:
        files, errors = _collect(tmp_path)
    finally:
        locked.chmod(0o755)

    assert [os.path.basename(f) for f in files] == ["open.txt"]
    assert [p for p, _ in errors] == [str(locked)]
