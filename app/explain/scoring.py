from __future__ import annotations

from typing import Iterable


def overlap_score(jd_keywords: Iterable[str], resume_keywords: Iterable[str]) -> int:
    """Percentage of job-description keywords also present among resume keywords.

    Not symmetric: resume verbosity never dilutes the score, only coverage of
    what the job description asks for counts. Rounds half up.
    """
    jd = set(jd_keywords)
    if not jd:
        return 0
    hits = len(jd & set(resume_keywords))
    total = len(jd)
    score = (200 * hits + total) // (2 * total)
    return max(0, min(100, score))
