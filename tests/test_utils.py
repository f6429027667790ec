"""Unit tests for utility functions (mongen.utils).

Tests cover:
- ensure_dir / write_file / write_file_async (use tmp_path)
- Rich output helpers
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mongen.parser.models import FieldSpec, FieldType
from mongen.utils import (
    ensure_dir,
    print_error,
    print_fields_table,
    print_info,
    print_success,
    print_warning,
    write_file,
    write_file_async,
)


class TestFileHelpers:
    @pytest.mark.unit
    def test_ensure_dir_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b"
        assert ensure_dir(target) == target
        assert target.is_dir()

    @pytest.mark.unit
    def test_ensure_dir_idempotent(self, tmp_path: Path):
        ensure_dir(tmp_path / "models")
        ensure_dir(tmp_path / "models")
        assert (tmp_path / "models").is_dir()

    @pytest.mark.unit
    def test_write_file_creates_parents(self, tmp_path: Path):
        path = write_file(tmp_path / "Post" / "PostModel.js", "content")
        assert path.read_text(encoding="utf-8") == "content"

    @pytest.mark.unit
    def test_write_file_overwrites(self, tmp_path: Path):
        target = tmp_path / "file.js"
        write_file(target, "first")
        write_file(target, "second")
        assert target.read_text(encoding="utf-8") == "second"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_write_file_async(self, tmp_path: Path):
        path = await write_file_async(tmp_path / "x" / "y.ts", "typed")
        assert path.read_text(encoding="utf-8") == "typed"


class TestOutputHelpers:
    @pytest.mark.unit
    def test_messages(self, capsys):
        print_success("created")
        print_error("failed")
        print_warning("careful")
        print_info("note")
        out = capsys.readouterr().out
        for word in ("created", "failed", "careful", "note"):
            assert word in out

    @pytest.mark.unit
    def test_markup_in_message_is_literal(self, capsys):
        print_error("Field Type [string] : ")
        assert "[string]" in capsys.readouterr().out

    @pytest.mark.unit
    def test_fields_table(self, capsys):
        print_fields_table("Post", [
            FieldSpec(name="title"),
            FieldSpec(name="author", type=FieldType.OBJECT_ID, reference="User", is_array=True),
        ])
        out = capsys.readouterr().out
        assert "Post fields" in out
        assert "author" in out
        assert "User" in out
