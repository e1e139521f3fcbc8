"""Tests for line splitting and edit scripts."""

from services.diff_engine import ADD, CHANGE, COPY, DELETE, LineDiffEngine, split_lines


def test_split_empty_string_has_no_lines():
    assert split_lines("") == []
    assert split_lines([""]) == []


def test_split_lines():
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\n") == ["a", ""]
    assert split_lines(["a", ""]) == ["a", ""]


def test_identical_input_is_one_copy():
    edits = LineDiffEngine().diff("a\nb", "a\nb")
    assert [(e.type, e.orig, e.closing) for e in edits] == [(COPY, ["a", "b"], ["a", "b"])]


def test_added_against_empty_text():
    edits = LineDiffEngine().diff("", "new")
    assert [(e.type, e.orig, e.closing) for e in edits] == [(ADD, [], ["new"])]


def test_both_empty_has_no_edits():
    assert LineDiffEngine().diff("", "") == []


def test_edit_script_kinds():
    edits = LineDiffEngine().diff(["a", "b", "c", "d"], ["a", "x", "c", "e", "f"])
    assert [e.type for e in edits] == [COPY, CHANGE, COPY, CHANGE]
    assert edits[1].orig == ["b"] and edits[1].closing == ["x"]
    assert edits[3].norig() == 1 and edits[3].nclosing() == 2


def test_delete_run():
    edits = LineDiffEngine().diff("a\nb\nc", "a")
    assert [(e.type, e.orig) for e in edits] == [(COPY, ["a"]), (DELETE, ["b", "c"])]
