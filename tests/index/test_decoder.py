"""Tests for SCIP index decoding."""

from __future__ import annotations

from pathlib import Path

import pytest

from apidrift.core.errors import DecodeError, ErrorCode
from apidrift.index import schema
from apidrift.index.decoder import decode_index, read_index
from apidrift.index.models import Role


class TestDecodeIndex:
    """Tests for decode_index."""

    def test_documents_symbols_and_occurrences(self, scip) -> None:
        data = scip.index(
            scip.document(
                "kit.go",
                occurrences=[scip.go_symbol("F()."), scip.go_symbol("G().")],
                symbols=[(scip.go_symbol("F()."), scip.go_doc("func F()", "F does things."))],
            )
        )

        index = decode_index(data)

        assert len(index.documents) == 1
        doc = index.documents[0]
        assert doc.relative_path == "kit.go"
        assert doc.language == "go"
        assert [o.symbol for o in doc.occurrences] == [
            scip.go_symbol("F()."),
            scip.go_symbol("G()."),
        ]
        assert doc.symbols[0].documentation == ("```go\nfunc F()\n```", "F does things.")

    def test_metadata(self, scip) -> None:
        index = decode_index(scip.index(tool="scip-go"))

        assert index.metadata.tool_name == "scip-go"
        assert index.metadata.tool_version == "0.1.0"
        assert index.metadata.project_root == "file:///src"
        assert index.documents == ()

    def test_iteration_preserves_order(self, scip) -> None:
        data = scip.index(
            scip.document("a.go", occurrences=["s a 1 . A.", "s a 1 . B."]),
            scip.document("b.go", occurrences=["s a 1 . C."]),
        )

        index = decode_index(data)

        assert [o.symbol for o in index.iter_occurrences()] == ["s a 1 . A.", "s a 1 . B.", "s a 1 . C."]

    def test_ranges_and_roles(self) -> None:
        doc = schema.Document(relative_path="a.go")
        doc.occurrences.add(range=[3, 4, 9], symbol="s a 1 . A.", symbol_roles=schema.ROLE_DEFINITION)
        doc.occurrences.add(range=[1, 2, 5, 6], symbol="s a 1 . B.", symbol_roles=schema.ROLE_IMPORT)
        doc.occurrences.add(range=[7, 8, 9], symbol="s a 1 . C.", symbol_roles=schema.ROLE_READ_ACCESS)
        index = schema.Index()
        index.documents.add().CopyFrom(doc)

        a, b, c = decode_index(index.SerializeToString()).documents[0].occurrences

        assert (a.line, a.column, a.end_line, a.end_column, a.role) == (3, 4, 3, 9, Role.DEFINITION)
        assert (b.line, b.column, b.end_line, b.end_column, b.role) == (1, 2, 5, 6, Role.IMPORT)
        assert c.role is Role.REFERENCE

    def test_symbolless_entries_are_dropped(self) -> None:
        doc = schema.Document(relative_path="a.go")
        doc.occurrences.add(range=[0, 0, 1], symbol="")
        doc.symbols.add(symbol="", documentation=["x\nfunc X()"])
        index = schema.Index()
        index.documents.add().CopyFrom(doc)

        decoded = decode_index(index.SerializeToString()).documents[0]

        assert decoded.occurrences == ()
        assert decoded.symbols == ()

    def test_given_empty_buffer_when_decode_then_raises(self) -> None:
        # Given
        data = b""

        # When / Then
        with pytest.raises(DecodeError) as exc_info:
            decode_index(data, source="old dependency")
        assert exc_info.value.code == ErrorCode.INDEX_EMPTY

    def test_given_truncated_buffer_when_decode_then_raises(self, scip) -> None:
        # Given
        data = scip.index(scip.document("kit.go", occurrences=[scip.go_symbol("F().")]))
        truncated = data[: len(data) - 5]

        # When / Then
        with pytest.raises(DecodeError) as exc_info:
            decode_index(truncated)
        assert exc_info.value.code == ErrorCode.INDEX_MALFORMED

    def test_given_garbage_when_decode_then_raises(self) -> None:
        # Given - field 2, length-delimited, claims 5 bytes but only 2 follow
        data = b"\x12\x05ab"

        # When / Then
        with pytest.raises(DecodeError):
            decode_index(data)


class TestReadIndex:
    """Tests for read_index."""

    def test_reads_file(self, tmp_path: Path, scip) -> None:
        path = tmp_path / "index.scip"
        path.write_bytes(scip.index(scip.document("kit.go")))

        index = read_index(path)

        assert index.documents[0].relative_path == "kit.go"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DecodeError) as exc_info:
            read_index(tmp_path / "nope.scip")
        assert exc_info.value.code == ErrorCode.INDEX_NOT_FOUND

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(DecodeError) as exc_info:
            read_index(tmp_path)
        assert exc_info.value.code == ErrorCode.INDEX_UNREADABLE
