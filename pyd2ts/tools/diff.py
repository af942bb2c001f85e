from __future__ import annotations

import difflib
import re
from dataclasses import dataclass
from typing import List

NO_NEWLINE_MARKER = "\\ No newline at end of file"

_LINE_RE = re.compile(r"(?<=\n)")


@dataclass(frozen=True)
class DiffStats:
    insertions: int
    deletions: int
    hunks: int


def build_diff(
    file1_path: str,
    file1_content: str,
    file2_path: str,
    file2_content: str,
    *,
    context_lines: int = 4,
) -> str:
    """
    Unified diff between two text blobs with a git style dual-path header:

      diff --git a/<file1_path> b/<file2_path>
      --- a/<file1_path>
      +++ b/<file2_path>
      @@ ... @@

    Paths are labels only; nothing is read from disk. Identical contents
    produce the header alone. Line endings are compared as-is.
    """
    header = (
        f"diff --git a/{file1_path} b/{file2_path}\n"
        f"--- a/{file1_path}\n"
        f"+++ b/{file2_path}\n"
    )

    diff_gen = difflib.unified_diff(
        _split_lines(file1_content),
        _split_lines(file2_content),
        fromfile="Original",
        tofile="Modified",
        n=context_lines,
        lineterm="",
    )

    body: List[str] = []
    for i, line in enumerate(diff_gen):
        # difflib 자체 헤더(---/+++)는 버리고 위에서 다시 만든다
        if i < 2:
            continue
        if line.startswith("@@"):
            body.append(line + "\n")
        elif line.endswith("\n"):
            body.append(line)
        else:
            body.append(line + "\n" + NO_NEWLINE_MARKER + "\n")

    return header + "".join(body)


def _split_lines(text: str) -> List[str]:
    """Split on "\n" only; form feeds, U+2028 and friends stay inside the line."""
    return [line for line in _LINE_RE.split(text) if line]


def diff_stats(diff_text: str) -> DiffStats:
    insertions = 0
    deletions = 0
    hunks = 0

    for line in (diff_text or "").split("\n"):
        if line.startswith("@@"):
            hunks += 1
        elif not hunks:
            # header lines before the first hunk
            continue
        elif line.startswith("+"):
            insertions += 1
        elif line.startswith("-"):
            deletions += 1

    return DiffStats(insertions=insertions, deletions=deletions, hunks=hunks)

