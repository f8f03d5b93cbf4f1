"""Tests for the archive resolution orchestrator."""

import zipfile
from unittest.mock import MagicMock, patch

import pytest

from archive.create import create_archive
from archive.models import UploadedArchive, UrlReference
from common.errors import ArchiveValidationError
from constants import ArchiveType


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "a.js").write_text("a")
    (tmp_path / "b.js").write_text("b")
    (tmp_path / "specs").mkdir()
    with zipfile.ZipFile(tmp_path / "fn.zip", "w") as zf:
        zf.writestr("main.js", "x")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestImmediateMode:

    @patch("archive.create.upload_archive")
    def test_multiple_files_are_packaged_then_uploaded(self, mock_upload, project):
        uploaded = UploadedArchive(type=ArchiveType.URL, url="http://ctl/proxy/storage/v1/archive?id=1")
        mock_upload.return_value = uploaded
        client = MagicMock()

        result = create_archive(client, ["./a.js", "./b.js"])

        assert result is uploaded
        called_client, path = mock_upload.call_args[0]
        assert called_client is client
        assert path.endswith(".zip")
        with zipfile.ZipFile(path) as zf:
            assert sorted(zf.namelist()) == ["a.js", "b.js"]

    @patch("archive.create.upload_archive")
    def test_existing_zip_is_uploaded_directly(self, mock_upload, project):
        create_archive(MagicMock(), ["./fn.zip"])
        assert mock_upload.call_args[0][1] == "./fn.zip"

    @patch("archive.create.upload_archive")
    def test_url_is_never_packaged(self, mock_upload, project):
        url = "https://example.com/fn.zip"
        create_archive(MagicMock(), [url], no_zip=False)
        assert mock_upload.call_args[0][1] == url

    def test_client_required(self, project):
        with pytest.raises(ValueError):
            create_archive(None, ["a.js"])


class TestSpecMode:

    @patch("archive.create.upload_archive")
    def test_returns_reference_without_uploading(self, mock_upload, project):
        result = create_archive(None, ["a.js"], spec_dir="specs", spec_file="pkg.yaml")

        assert isinstance(result, UrlReference)
        assert result.archive_store_key.startswith("archive://a-js-")
        assert (project / "specs" / "pkg.yaml").exists()
        mock_upload.assert_not_called()

    def test_reuses_existing_record(self, project):
        (project / "specs" / "existing.yaml").write_text(
            "kind: ArchiveUploadSpec\nname: myfn-ab12\ninclude:\n  - a.js\n"
        )
        result = create_archive(None, ["a.js"], spec_dir="specs", spec_file="pkg.yaml")
        assert result.to_dict() == {"type": "url", "url": "archive://myfn-ab12"}
        assert not (project / "specs" / "pkg.yaml").exists()


class TestValidation:

    @pytest.mark.parametrize("spec_file", [None, "pkg.yaml"])
    @patch("archive.create.upload_archive")
    def test_validation_aborts_in_both_modes(self, mock_upload, spec_file, project):
        with pytest.raises(ArchiveValidationError) as excinfo:
            create_archive(MagicMock(), ["a.js", "x.js", "y/*.js"], spec_dir="specs", spec_file=spec_file)
        assert excinfo.value.paths == ("x.js", "y/*.js")
        mock_upload.assert_not_called()
        assert list((project / "specs").iterdir()) == []
