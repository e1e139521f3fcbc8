"""Tests for side-by-side row formatting."""

from services.diff_formatter import DiffFormatter, LineStats

TEN_LINES = "\n".join(str(n) for n in range(1, 11))


def _changed_fourth_line():
    lines = TEN_LINES.split("\n")
    lines[3] = "X"
    return "\n".join(lines)


def _cells(rows):
    return [
        (row["left"]["num"], row["left"]["type"], row["right"]["num"], row["right"]["type"])
        for row in rows if not row["header"]
    ]


def test_context_around_a_change():
    rows = DiffFormatter().format(TEN_LINES, _changed_fourth_line(), show_header=True)

    assert rows[0] == {"header": True, "left": "Line 2", "right": "Line 2"}
    assert _cells(rows) == [
        (2, "unchanged", 2, "unchanged"),
        (3, "unchanged", 3, "unchanged"),
        (4, "modified", 4, "modified"),
        (5, "unchanged", 5, "unchanged"),
        (6, "unchanged", 6, "unchanged"),
    ]


def test_show_full_keeps_every_line():
    rows = DiffFormatter(show_full=True).format(TEN_LINES, _changed_fourth_line())
    assert len(rows) == 10
    assert [row["left"]["type"] for row in rows].count("modified") == 1


def test_line_stats_continue_across_calls():
    stats = LineStats()
    formatter = DiffFormatter()
    formatter.format(TEN_LINES, _changed_fourth_line(), line_stats=stats)
    assert (stats.x, stats.y) == (10, 10)

    rows = formatter.format("a", "b", line_stats=stats)
    assert _cells(rows) == [(11, "modified", 11, "modified")]


def test_empty_left_is_a_pure_addition():
    rows = DiffFormatter().format("", "new")
    assert _cells(rows) == [("", "empty", 1, "added")]


def test_uneven_change_pads_with_empty_cells():
    rows = DiffFormatter().format("a\nb", "c")
    assert _cells(rows) == [(1, "modified", 1, "modified"), (2, "deleted", "", "empty")]


def test_markup_is_escaped():
    rows = DiffFormatter().format("<b>", "<i>")
    assert rows[0]["left"]["html"] == '<mark class="diff-del">&lt;b&gt;</mark>'
    assert rows[0]["right"]["text"] == "<i>"
