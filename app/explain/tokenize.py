from __future__ import annotations

import re

from .config import DEFAULT_EXPLAIN_CONFIG, ExplainConfig
from .text import normalize_text

_TOKEN_RE = re.compile(r"[a-z0-9+#]{2,}")


def _is_token(candidate: str, config: ExplainConfig) -> bool:
    if not any(ch.isalnum() for ch in candidate):
        return False
    if len(candidate) < 3 and candidate not in config.short_tokens:
        return False
    if config.drop_numeric_tokens and candidate.isdigit():
        return False
    return candidate not in config.stopwords


def tokenize(text: str, config: ExplainConfig = DEFAULT_EXPLAIN_CONFIG) -> list[str]:
    lowered = normalize_text(text).lower()
    return [candidate for candidate in _TOKEN_RE.findall(lowered) if _is_token(candidate, config)]
