"""
Side-by-side row formatter for line edit scripts.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from services.diff_engine import ADD, CHANGE, COPY, DELETE, LineDiffEngine, Lines


@dataclass
class LineStats:
    """Lines consumed so far on each side; shared across calls to keep numbering going"""
    x: int = 0
    y: int = 0


def _escape(text: str) -> str:
    return (text.replace("&", "&amp;").replace("<", "&lt;")
            .replace(">", "&gt;").replace('"', "&quot;"))


def _empty_cell() -> Dict[str, Any]:
    return {"num": "", "type": "empty", "text": "", "html": ""}


class DiffFormatter:
    """Builds aligned left/right rows with optional context and "Line N" headers"""

    def __init__(self, engine: Optional[LineDiffEngine] = None, leading_context_lines: int = 2,
                 trailing_context_lines: int = 2, show_full: bool = False):
        self.engine = engine or LineDiffEngine()
        self.leading_context_lines = leading_context_lines
        self.trailing_context_lines = trailing_context_lines
        self.show_full = show_full

    def format(self, a: Lines, b: Lines, show_header: bool = False,
               line_stats: Optional[LineStats] = None) -> List[Dict[str, Any]]:
        stats = line_stats if line_stats is not None else LineStats()
        rows: List[Dict[str, Any]] = []
        context: List[Dict[str, Any]] = []
        in_block = self.show_full

        edits = self.engine.diff(a, b)
        if self.show_full and show_header and edits:
            rows.append(self._header(stats, []))

        for edit in edits:
            if edit.type == COPY:
                if in_block and not self.show_full:
                    keep = self.trailing_context_lines
                    if edit.norig() > keep + self.leading_context_lines:
                        # Gap too wide, close the block after the trailing context.
                        lines = edit.orig
                        rows.extend(self._unchanged(stats, line) for line in lines[:keep])
                        skipped = lines[keep:]
                        lead = skipped[len(skipped) - self.leading_context_lines:] if self.leading_context_lines else []
                        for _ in range(len(skipped) - len(lead)):
                            stats.x += 1
                            stats.y += 1
                        context = [self._unchanged(stats, line) for line in lead]
                        in_block = False
                        continue
                if in_block:
                    rows.extend(self._unchanged(stats, line) for line in edit.orig)
                else:
                    context = self._pending_context(stats, context, edit.orig)
                continue

            if not in_block:
                if show_header:
                    rows.append(self._header(stats, context))
                rows.extend(context)
                context = []
                in_block = True

            if edit.type == ADD:
                rows.extend(self._row(_empty_cell(), self._added(stats, line)) for line in edit.closing)
            elif edit.type == DELETE:
                rows.extend(self._row(self._deleted(stats, line), _empty_cell()) for line in edit.orig)
            elif edit.type == CHANGE:
                rows.extend(self._changed(stats, edit.orig, edit.closing))

        return rows

    def _pending_context(self, stats: LineStats, context, lines) -> List[Dict[str, Any]]:
        """Only the last leading_context_lines unchanged lines survive as context"""
        keep = self.leading_context_lines
        lead = lines[len(lines) - keep:] if keep else []
        for _ in range(len(lines) - len(lead)):
            stats.x += 1
            stats.y += 1
        context = context + [self._unchanged(stats, line) for line in lead]
        return context[len(context) - keep:] if keep else []

    def _changed(self, stats: LineStats, orig: List[str], closing: List[str]) -> List[Dict[str, Any]]:
        rows = []
        for idx in range(max(len(orig), len(closing))):
            if idx < len(orig) and idx < len(closing):
                stats.x += 1
                stats.y += 1
                rows.append(self._row(
                    {"num": stats.x, "type": "modified", "text": orig[idx],
                     "html": f'<mark class="diff-del">{_escape(orig[idx])}</mark>'},
                    {"num": stats.y, "type": "modified", "text": closing[idx],
                     "html": f'<mark class="diff-add">{_escape(closing[idx])}</mark>'},
                ))
            elif idx < len(orig):
                rows.append(self._row(self._deleted(stats, orig[idx]), _empty_cell()))
            else:
                rows.append(self._row(_empty_cell(), self._added(stats, closing[idx])))
        return rows

    def _unchanged(self, stats: LineStats, line: str) -> Dict[str, Any]:
        stats.x += 1
        stats.y += 1
        return self._row(
            {"num": stats.x, "type": "unchanged", "text": line, "html": _escape(line)},
            {"num": stats.y, "type": "unchanged", "text": line, "html": _escape(line)},
        )

    def _deleted(self, stats: LineStats, line: str) -> Dict[str, Any]:
        stats.x += 1
        return {"num": stats.x, "type": "deleted", "text": line,
                "html": f'<mark class="diff-del">{_escape(line)}</mark>'}

    def _added(self, stats: LineStats, line: str) -> Dict[str, Any]:
        stats.y += 1
        return {"num": stats.y, "type": "added", "text": line,
                "html": f'<mark class="diff-add">{_escape(line)}</mark>'}

    def _header(self, stats: LineStats, context: List[Dict[str, Any]]) -> Dict[str, Any]:
        if context:
            left_num, right_num = context[0]["left"]["num"], context[0]["right"]["num"]
        else:
            left_num, right_num = stats.x + 1, stats.y + 1
        return {"header": True, "left": f"Line {left_num}", "right": f"Line {right_num}"}

    @staticmethod
    def _row(left: Dict[str, Any], right: Dict[str, Any]) -> Dict[str, Any]:
        return {"header": False, "left": left, "right": right}
