"""Tests for locating and merging the spectr marker block."""
import pytest

from spectr_cli.errors import (
    MarkerError,
    MultipleStartMarkersError,
    NestedStartMarkerError,
    OrphanedEndMarkerError,
)
from spectr_cli.markers import (
    END_MARKER,
    START_MARKER,
    MarkerStatus,
    extract_body,
    has_markers,
    locate,
    merge,
    render_block,
)

S = START_MARKER
E = END_MARKER


class TestLocate:
    """Classification of marker sentinels."""

    def test_no_markers(self):
        state = locate("just some text\n")
        assert state.status is MarkerStatus.ABSENT
        assert not state.is_open
        assert state.body("just some text\n") is None

    def test_single_block(self):
        buffer = f"Header\n{S}\nbody\n{E}\nFooter"
        state = locate(buffer)

        assert state.status is MarkerStatus.OPEN
        assert state.start_index == len("Header\n")
        assert buffer[state.end_index:state.end_index + len(E)] == E
        assert state.body(buffer) == "body"

    def test_orphaned_end(self):
        state = locate(E)
        assert state.status is MarkerStatus.ORPHAN_END
        assert state.is_error
        assert state.offending_index == 0

    def test_end_before_start(self):
        state = locate(f"{E}\n{S}\nbody\n{E}\n")
        assert state.status is MarkerStatus.ORPHAN_END

    def test_two_starts_without_end(self):
        state = locate(f"{S}\na\n{S}\nb\n")
        assert state.status is MarkerStatus.MULTIPLE_STARTS
        assert not state.nested

    def test_nested_start(self):
        state = locate(f"{S}\na\n{S}\nb\n{E}\n")
        assert state.status is MarkerStatus.MULTIPLE_STARTS
        assert state.nested
        assert state.offending_index == len(f"{S}\na\n")

    def test_unterminated_start_runs_to_end_of_buffer(self):
        buffer = f"Intro\n{S}\nold stuff"
        state = locate(buffer)

        assert state.status is MarkerStatus.OPEN
        assert state.end_index is None
        assert state.suffix_start == len(buffer)
        assert state.body(buffer) == "old stuff"

    def test_second_block_after_close_is_suffix(self):
        buffer = f"{S}\nfirst\n{E}\nmiddle\n{S}\nsecond\n{E}\n"
        state = locate(buffer)

        assert state.status is MarkerStatus.OPEN
        assert state.body(buffer) == "first"
        assert buffer[state.suffix_start:].startswith("\nmiddle\n")

    def test_case_insensitive(self):
        buffer = "<!-- SPECTR:START -->\nX\n<!-- Spectr:End -->\n"
        assert locate(buffer).is_open
        assert extract_body(buffer) == "X"

    def test_has_markers(self):
        assert has_markers(render_block("X"))
        assert not has_markers("nothing here")
        assert not has_markers(E)


class TestMerge:
    """Merging a new managed body into existing content."""

    def test_new_file(self):
        result = merge(None, "X")
        assert result.content == f"{S}\nX\n{E}\n"
        assert result.action == "CREATED"

    def test_replaces_body_between_markers(self):
        existing = f"Header\n{S}\nold\n{E}\nFooter"
        result = merge(existing, "new")

        assert result.content == f"Header\n{S}\nnew\n{E}\nFooter"
        assert result.action == "UPDATED"

    def test_appends_block_to_plain_file(self):
        result = merge("plain text", "B")

        assert result.content == f"plain text\n\n{S}\nB\n{E}\n"
        assert result.action == "UPDATED"

    def test_trailing_newlines_collapse_to_one_blank_line(self):
        result = merge("plain text\n\n\n", "B")
        assert result.content == f"plain text\n\n{S}\nB\n{E}\n"

    def test_empty_file_gets_just_the_block(self):
        result = merge("", "B")
        assert result.content == render_block("B")
        assert result.action == "UPDATED"

    def test_orphaned_end_marker(self):
        with pytest.raises(OrphanedEndMarkerError) as exc_info:
            merge(E, "X", path="CLAUDE.md")

        assert exc_info.value.path == "CLAUDE.md"
        assert "orphaned end marker" in str(exc_info.value)

    def test_multiple_start_markers(self):
        with pytest.raises(MultipleStartMarkersError, match="multiple start markers"):
            merge(f"{S}\none\n{S}\ntwo\n", "X")

    def test_nested_start_marker(self):
        with pytest.raises(NestedStartMarkerError, match="nested start marker"):
            merge(f"{S}\none\n{S}\ntwo\n{E}\n", "X")

    def test_marker_errors_share_a_base_class(self):
        with pytest.raises(MarkerError):
            merge(f"text\n{E}\n", "X")

    def test_idempotent(self):
        first = merge("User notes\n", "body").content
        second = merge(first, "body")

        assert second.action == "UNCHANGED"
        assert second.content == first

    def test_created_block_is_stable(self):
        created = merge(None, "line one\nline two").content
        assert merge(created, "line one\nline two").action == "UNCHANGED"

    def test_preserves_prefix_and_suffix_bytes(self):
        prefix = "# Title\r\n\r\nSome   spacing\t\n"
        suffix = "\n\ntrailer without newline"
        existing = f"{prefix}{S}\nold\n{E}{suffix}"

        content = merge(existing, "new").content

        assert content.startswith(prefix)
        assert content.endswith(suffix)

    def test_round_trip_body(self):
        body = "multi\nline\n\nbody"
        assert extract_body(merge("Intro", body).content) == body

    def test_writes_canonical_lowercase_markers(self):
        existing = "<!-- SPECTR:START -->\nold\n<!-- SPECTR:END -->\n"
        assert merge(existing, "new").content == f"{S}\nnew\n{E}\n"

    def test_closes_unterminated_block(self):
        result = merge(f"Intro\n{S}\nold stuff", "new")

        assert result.content == f"Intro\n{S}\nnew\n{E}"
        assert merge(result.content, "new").action == "UNCHANGED"

    def test_only_first_block_is_managed(self):
        existing = f"{S}\nfirst\n{E}\nmiddle\n{S}\nsecond\n{E}\n"
        result = merge(existing, "new")

        assert result.content == f"{S}\nnew\n{E}\nmiddle\n{S}\nsecond\n{E}\n"
