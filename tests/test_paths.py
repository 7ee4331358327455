"""Tests for input and output path rules."""

from pathlib import Path

import pytest

from solid_canonical import (
    PreconditionError,
    assembly_output_path,
    change_extension,
    document_kind,
    require_file,
    simplified_output_path,
    validate_output_directory,
)


class TestOutputPaths:
    def test_simplified_output_path(self):
        result = simplified_output_path("a/b.stp.temp.SLDPRT", 3000)
        assert result == Path("a/b.stp.temp.simplified_top3000_simplest.SLDPRT")

    def test_simplified_output_path_keep_count(self):
        assert simplified_output_path("part.SLDPRT", 5).name == "part.simplified_top5_simplest.SLDPRT"

    def test_assembly_output_path(self):
        assert assembly_output_path("models/plant.stp") == Path("models/plant.SLDASM")

    def test_change_extension_without_dot(self):
        assert change_extension("x/y.txt", "json") == Path("x/y.json")

    def test_change_extension_no_suffix(self):
        assert change_extension("x/readme", ".md") == Path("x/readme.md")


class TestDocumentKind:
    @pytest.mark.parametrize("path, kind", [
        ("model.SLDPRT", "part"),
        ("model.sldprt", "part"),
        ("plant.SLDASM", "assembly"),
    ])
    def test_known(self, path, kind):
        assert document_kind(path) == kind

    def test_unsupported(self):
        with pytest.raises(PreconditionError, match="Unsupported file type"):
            document_kind("drawing.SLDDRW")


class TestRequireFile:
    def test_existing(self, tmp_path):
        f = tmp_path / "model.stp"
        f.write_text("ISO-10303-21;")
        assert require_file(f) == f

    def test_missing(self, tmp_path):
        with pytest.raises(PreconditionError, match="Source file does not exist"):
            require_file(tmp_path / "missing.stp")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(PreconditionError):
            require_file(tmp_path)


class TestValidateOutputDirectory:
    def test_existing_directory(self, tmp_path):
        out = tmp_path / "plant.SLDASM"
        assert validate_output_directory(out) == tmp_path.resolve()
        # Probe file removed
        assert list(tmp_path.iterdir()) == []

    def test_creates_missing_directory(self, tmp_path):
        out = tmp_path / "new" / "nested" / "plant.SLDASM"
        directory = validate_output_directory(out)
        assert directory.is_dir()
        assert directory == (tmp_path / "new" / "nested").resolve()

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(PreconditionError, match="Cannot create output directory"):
            validate_output_directory(blocker / "plant.SLDASM")

    def test_not_writable(self, tmp_path, monkeypatch):
        def deny(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "write_text", deny)
        with pytest.raises(PreconditionError, match="No write permission"):
            validate_output_directory(tmp_path / "plant.SLDASM")
