"""Interactive prompts: choosing entries to import and confirming overwrites."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from enum import Enum, auto

from cursorsync.errors import CursorSyncError
from cursorsync.fsutil import Entry

SELECT_ALL_LABEL = "[Select All]"

_SELECT_MESSAGE = "Select rules/skills/commands to sync:"
_SELECT_HINT = "Enter numbers separated by spaces or commas (ranges like 2-4 allowed), blank for none: "
_OVERWRITE_HELP = "y=yes  N=no (default)  a=yes to all  s=skip all"


class OverwriteDecision(Enum):
    """The answer given to an overwrite prompt."""

    NO = auto()
    YES = auto()
    ALL = auto()
    SKIP_ALL = auto()


def _ask(prompt: str) -> str:
    sys.stderr.write(prompt)
    sys.stderr.flush()
    try:
        return input()
    except EOFError as exc:
        raise CursorSyncError("interrupt") from exc


def _label(entry: Entry) -> str:
    label = entry.rel_path()
    return f"{label}/" if entry.is_dir else label


def _parse_selection(text: str, count: int) -> list[int] | None:
    """Turn ``"1 3, 4-6"`` into sorted 1-based indices; None if anything is invalid."""
    picked: set[int] = set()
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        start, sep, end = token.partition("-")
        try:
            low = int(start)
            high = int(end) if sep else low
        except ValueError:
            return None
        if low > high or low < 1 or high > count:
            return None
        picked.update(range(low, high + 1))
    return sorted(picked)


def select_entries(entries: Sequence[Entry]) -> list[Entry]:
    """Let the user pick entries; choosing ``[Select All]`` returns every entry."""
    if not entries:
        return []

    options = [SELECT_ALL_LABEL, *(_label(e) for e in entries)]
    lines = [f"? {_SELECT_MESSAGE}"]
    lines.extend(f"  {number:>3}) {label}" for number, label in enumerate(options, start=1))
    sys.stderr.write("\n".join(lines) + "\n")

    while True:
        chosen = _parse_selection(_ask(_SELECT_HINT), len(options))
        if chosen is not None:
            break
        sys.stderr.write(f"Invalid selection; use numbers between 1 and {len(options)}.\n")

    if 1 in chosen:
        return list(entries)
    return [entries[number - 2] for number in chosen]


def confirm_overwrite(path: str) -> OverwriteDecision:
    """Ask whether to overwrite ``path``: y, N (default), a (all) or s (skip all)."""
    prompt = f"? Overwrite {path}? [y/N/a/s] (N) "
    while True:
        answer = _ask(prompt).strip()
        if answer == "?":
            sys.stderr.write(f"{_OVERWRITE_HELP}\n")
            continue
        break
    if answer in ("y", "Y"):
        return OverwriteDecision.YES
    if answer in ("a", "A"):
        return OverwriteDecision.ALL
    if answer in ("s", "S"):
        return OverwriteDecision.SKIP_ALL
    return OverwriteDecision.NO