from __future__ import annotations

import re
from typing import Sequence

from app.schemas.explain import EvidenceItem

RESUME_SOURCE = "Resume"
_ELLIPSIS = "…"


def _find_keyword(sentence: str, keyword: str) -> re.Match[str] | None:
    if not keyword:
        return None
    return re.search(re.escape(keyword), sentence, re.IGNORECASE)


def clip_evidence_text(sentence: str, keyword: str, max_chars: int = 220) -> str:
    """Shorten a sentence for display, keeping ``keyword`` inside the window."""
    if max_chars <= 0 or len(sentence) <= max_chars:
        return sentence

    width = max_chars - 1
    match = _find_keyword(sentence, keyword)
    if match is None or match.end() <= width:
        return sentence[:width].rstrip() + _ELLIPSIS

    # Keyword sits past the cut: centre the window on it.
    width -= 1
    hit_start, hit_end = match.span()
    if hit_end - hit_start >= width:
        # Keyword alone does not fit; keep it whole rather than cut it.
        tail = _ELLIPSIS if hit_end < len(sentence) else ""
        return _ELLIPSIS + sentence[hit_start:hit_end] + tail

    start = max(0, hit_start - (width - (hit_end - hit_start)) // 2)
    start = min(start, len(sentence) - width)
    window = sentence[start:start + width].strip()
    if start + width >= len(sentence):
        return _ELLIPSIS + window
    return _ELLIPSIS + window + _ELLIPSIS


def fallback_evidence(keyword: str) -> EvidenceItem:
    return EvidenceItem(text=f'"{keyword}" was detected in the resume text.', source=RESUME_SOURCE)


def locate_evidence(
    keyword: str,
    sentences: Sequence[str],
    cap: int = 2,
    max_chars: int = 220,
) -> list[EvidenceItem]:
    found: list[EvidenceItem] = []
    if keyword and cap > 0:
        for sentence in sentences:
            if _find_keyword(sentence, keyword) is not None:
                found.append(
                    EvidenceItem(
                        text=clip_evidence_text(sentence, keyword, max_chars),
                        source=RESUME_SOURCE,
                    )
                )
                if len(found) >= cap:
                    break
    return found or [fallback_evidence(keyword)]
