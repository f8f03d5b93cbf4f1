"""Tests for the single-input fast path."""

import zipfile

import pytest

from archive.fastpath import fast_path, is_zip_file
from archive.inputs import find_all_globs
from common.errors import ArchiveIOError


def _write_zip(path):
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("main.js", "module.exports = {}")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestIsZipFile:

    def test_detects_by_content(self, workdir):
        _write_zip(workdir / "archive.bin")
        (workdir / "fake.zip").write_text("not a zip")
        assert is_zip_file(str(workdir / "archive.bin"))
        assert not is_zip_file(str(workdir / "fake.zip"))

    def test_empty_zip_and_directories(self, workdir):
        with zipfile.ZipFile(workdir / "empty.zip", "w"):
            pass
        assert is_zip_file(str(workdir / "empty.zip"))
        assert not is_zip_file(str(workdir))


class TestFastPath:

    def test_existing_zip_is_used_unchanged(self, workdir):
        _write_zip(workdir / "fn.zip")
        inputs = ["./fn.zip"]
        assert fast_path(inputs, find_all_globs(inputs), no_zip=False) == "./fn.zip"

    def test_single_url_is_passed_through(self):
        url = "https://example.com/pkg/fn.zip"
        assert fast_path([url], [], no_zip=False) == url
        assert fast_path([url], [], no_zip=True) == url

    def test_nozip_single_file(self, workdir):
        (workdir / "main.py").write_text("print('hi')")
        inputs = ["main.py"]
        assert fast_path(inputs, find_all_globs(inputs), no_zip=True) == "main.py"

    def test_nozip_ignored_for_multiple_files(self, workdir):
        (workdir / "a.js").write_text("a")
        (workdir / "b.js").write_text("b")
        inputs = ["a.js", "b.js"]
        assert fast_path(inputs, find_all_globs(inputs), no_zip=True) is None

    def test_single_glob_returns_resolved_path(self, workdir):
        (workdir / "main.py").write_text("x")
        resolved = find_all_globs(["*.py"])
        assert fast_path(["*.py"], resolved, no_zip=True) == resolved[0]

    def test_plain_file_needs_packaging(self, workdir):
        (workdir / "main.py").write_text("x")
        assert fast_path(["main.py"], find_all_globs(["main.py"]), no_zip=False) is None

    def test_vanished_file_is_fatal(self, workdir):
        with pytest.raises(ArchiveIOError) as excinfo:
            fast_path(["gone.js"], [str(workdir / "gone.js")], no_zip=True)
        assert "open input file" in str(excinfo.value)
