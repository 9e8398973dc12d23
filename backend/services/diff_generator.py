"""
Diff Generator Service - Line-level diffs as unified patch text or display blocks
"""

from __future__ import annotations

from difflib import SequenceMatcher

from models.diff import ChangedBlock, DiffBlock, StructuredDiff, UnchangedBlock
from services.segmenter import split_lines

LEFT_LABEL = "current"
RIGHT_LABEL = "clipboard"


def _format_range(start: int, stop: int) -> str:
    """Unified diff range: 1-indexed start, length omitted when it is 1"""
    beginning = start + 1
    length = stop - start
    if length == 1:
        return f"{beginning}"
    if not length:
        beginning -= 1
    return f"{beginning},{length}"


class DiffGenerator:
    """Generate line diffs between the current buffer and a secondary one"""

    def __init__(self, left_label: str = LEFT_LABEL, right_label: str = RIGHT_LABEL):
        self.left_label = left_label
        self.right_label = right_label

    def _matcher(self, left_lines: list[str], right_lines: list[str]) -> SequenceMatcher:
        """Edit script shared by both renderers"""
        return SequenceMatcher(None, left_lines, right_lines, autojunk=False)

    def unified_diff(self, left: str, right: str, context_lines: int = 3) -> str:
        """Render the edit script as a unified patch ("" when the buffers match)"""
        left_lines = split_lines(left)
        right_lines = split_lines(right)
        matcher = self._matcher(left_lines, right_lines)

        result_lines = []
        for group in matcher.get_grouped_opcodes(context_lines):
            if not result_lines:
                result_lines.append(f"--- {self.left_label}\n")
                result_lines.append(f"+++ {self.right_label}\n")

            first, last = group[0], group[-1]
            old_range = _format_range(first[1], last[2])
            new_range = _format_range(first[3], last[4])
            result_lines.append(f"@@ -{old_range} +{new_range} @@\n")

            for tag, i1, i2, j1, j2 in group:
                if tag == "equal":
                    for line in left_lines[i1:i2]:
                        result_lines.append(f" {line}\n")
                    continue
                for line in left_lines[i1:i2]:
                    result_lines.append(f"-{line}\n")
                for line in right_lines[j1:j2]:
                    result_lines.append(f"+{line}\n")

        return "".join(result_lines)

    def structured_diff(self, left: str, right: str) -> StructuredDiff:
        """Group the edit script into unchanged runs and changed regions"""
        left_lines = split_lines(left)
        right_lines = split_lines(right)
        matcher = self._matcher(left_lines, right_lines)

        blocks: list[DiffBlock] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                if i2 > i1:
                    lines = left_lines[i1:i2]
                    blocks.append(UnchangedBlock(count=len(lines), lines=lines))
                continue

            # insert/delete/replace all render as one changed pair
            blocks.append(
                ChangedBlock(
                    old_lines=left_lines[i1:i2],
                    new_lines=right_lines[j1:j2],
                )
            )

        return StructuredDiff(
            left_label=self.left_label,
            right_label=self.right_label,
            blocks=blocks,
        )
