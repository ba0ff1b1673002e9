"""Line-based unified diffs without file headers."""

from __future__ import annotations

from difflib import SequenceMatcher

CONTEXT_LINES = 3


def unified_diff(before: str, after: str) -> str:
    """Return the hunks of a unified diff from ``before`` to ``after``.

    Only ``@@`` hunk headers and prefixed lines are produced, with no
    ``---``/``+++`` file headers. Identical inputs give an empty string.
    """
    old = before.splitlines()
    new = after.splitlines()
    matcher = SequenceMatcher(None, old, new, autojunk=False)

    out: list[str] = []
    for group in matcher.get_grouped_opcodes(CONTEXT_LINES):
        old_start, old_end = group[0][1], group[-1][2]
        new_start, new_end = group[0][3], group[-1][4]
        out.append(
            f"@@ -{old_start + 1},{old_end - old_start} "
            f"+{new_start + 1},{new_end - new_start} @@\n"
        )
        for tag, a1, a2, b1, b2 in group:
            if tag == "equal":
                out.extend(f" {line}\n" for line in old[a1:a2])
                continue
            out.extend(f"-{line}\n" for line in old[a1:a2])
            out.extend(f"+{line}\n" for line in new[b1:b2])
    return "".join(out)