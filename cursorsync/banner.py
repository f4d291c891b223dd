"""ASCII-art banner shown for a bare invocation."""

from typing import TextIO

CYAN = "\033[1;96m"
RESET = "\033[0m"

_WIDTH = 61
_WORD_GAP = 36

# Slanted block letters, one tuple per word, row by row.
_CURSOR_ROWS = (
    r"   ______",
    r"  / ____/_  ________________  _____",
    r" / /   / / / / ___/ ___/ __ \/ ___/",
    r"/ /___/ /_/ / /  (__  ) /_/ / /",
    r"\____/\__,_/_/  /____/\____/_/",
    r"",
)
_SYNC_ROWS = (
    r"   _____",
    r"  / ___/__  ______  _____",
    r"  \__ \/ / / / __ \/ ___/",
    r" ___/ / /_/ / / / / /__",
    r"/____/\__, /_/ /_/\___/",
    r"     /____/",
)


def _art() -> str:
    rows = (
        (left.ljust(_WORD_GAP) + right).ljust(_WIDTH)
        for left, right in zip(_CURSOR_ROWS, _SYNC_ROWS)
    )
    return "\n" + "\n".join(rows) + "\n"


ART = _art()


def print_banner(stream: TextIO) -> None:
    """Write the coloured banner to ``stream``."""
    stream.write(f"{CYAN}{ART}{RESET}\n")