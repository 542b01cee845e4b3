"""Display helpers for long category labels."""
from __future__ import annotations

import textwrap
from typing import Iterable, List


def _wrap_line(line: str, width: int) -> str:
    if len(line) <= width:
        return line
    body = line.rstrip()
    trailing = line[len(body):]
    pieces = textwrap.wrap(
        body,
        width=width,
        expand_tabs=False,
        replace_whitespace=False,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "\n".join(pieces) + trailing


def wrap_long_labels(strings: Iterable[str], width: int) -> List[str]:
    """Insert line breaks into each label at word boundaries.

    Lines are broken at the last space at or before *width* characters; the
    space at a break is replaced by the newline. Existing line breaks, tabs
    and other whitespace are kept. Words longer than *width* stay whole on
    their own line.
    """

    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    return ["\n".join(_wrap_line(line, width) for line in label.split("\n")) for label in strings]
