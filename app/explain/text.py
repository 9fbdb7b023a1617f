from __future__ import annotations

import re
from typing import Any, Iterator

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


def normalize_text(value: Any) -> str:
    """Collapse whitespace runs (newlines included) and trim; non-strings become ''."""
    if not isinstance(value, str):
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip()


def split_sentences(value: Any) -> Iterator[str]:
    """Yield non-empty sentences in source order.

    Line breaks in the raw text are treated as boundaries before whitespace
    is collapsed, so bullet-style resumes keep one evidence line per bullet.
    Within a line, a sentence ends at ``.``, ``!`` or ``?`` followed by
    whitespace.
    """
    if not isinstance(value, str):
        return
    for line in value.splitlines():
        for fragment in _SENTENCE_BOUNDARY_RE.split(line):
            sentence = normalize_text(fragment)
            if sentence:
                yield sentence
