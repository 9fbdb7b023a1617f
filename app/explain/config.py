from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

# Bump whenever STOPWORDS changes so persisted runs can be traced to the list
# that produced them.
STOPWORDS_VERSION = "2024.06"

_FUNCTION_WORDS = {
    "about",
    "above",
    "after",
    "again",
    "all",
    "also",
    "among",
    "and",
    "any",
    "are",
    "around",
    "because",
    "been",
    "before",
    "being",
    "between",
    "both",
    "but",
    "can",
    "could",
    "did",
    "does",
    "doing",
    "during",
    "each",
    "either",
    "etc",
    "every",
    "few",
    "for",
    "from",
    "further",
    "had",
    "has",
    "have",
    "having",
    "her",
    "here",
    "hers",
    "him",
    "his",
    "how",
    "into",
    "its",
    "itself",
    "just",
    "may",
    "might",
    "more",
    "most",
    "must",
    "not",
    "now",
    "off",
    "once",
    "only",
    "other",
    "our",
    "ours",
    "out",
    "over",
    "own",
    "per",
    "same",
    "shall",
    "she",
    "should",
    "some",
    "such",
    "than",
    "that",
    "the",
    "their",
    "theirs",
    "them",
    "then",
    "there",
    "these",
    "they",
    "this",
    "those",
    "through",
    "too",
    "under",
    "until",
    "upon",
    "very",
    "via",
    "was",
    "were",
    "what",
    "when",
    "where",
    "which",
    "while",
    "who",
    "whom",
    "why",
    "will",
    "with",
    "within",
    "without",
    "would",
    "yet",
    "you",
    "your",
    "yours",
}

_DOMAIN_FILLER = {
    "ability",
    "able",
    "candidate",
    "candidates",
    "company",
    "environment",
    "excellent",
    "experience",
    "experienced",
    "good",
    "great",
    "ideal",
    "including",
    "job",
    "join",
    "knowledge",
    "looking",
    "plus",
    "position",
    "preferred",
    "required",
    "requirements",
    "requires",
    "responsibilities",
    "responsible",
    "role",
    "seeking",
    "skill",
    "skills",
    "strong",
    "team",
    "teams",
    "using",
    "work",
    "working",
    "years",
}

STOPWORDS: frozenset[str] = frozenset(_FUNCTION_WORDS | _DOMAIN_FILLER)

# Two-character tokens that survive the minimum length rule.
SHORT_TOKENS: frozenset[str] = frozenset(
    {
        "ai",
        "bi",
        "c#",
        "f#",
        "hr",
        "js",
        "ml",
        "qa",
        "ts",
        "ui",
        "ux",
    }
)

BEHAVIORAL_QUESTIONS: tuple[str, ...] = (
    "Tell me about a time you had to learn something new quickly to deliver a result.",
    "Describe a situation where you disagreed with a teammate or stakeholder. How did you resolve it?",
    "Walk me through a project where priorities changed midway. How did you adapt?",
)


@dataclass(frozen=True)
class ExplainConfig:
    stopwords: frozenset[str] = STOPWORDS
    stopwords_version: str = STOPWORDS_VERSION
    short_tokens: frozenset[str] = SHORT_TOKENS
    jd_keyword_limit: int = 18
    resume_keyword_limit: int = 24
    drop_numeric_tokens: bool = False
    max_reasons: int = 8
    evidence_per_keyword: int = 2
    evidence_max_chars: int = 220
    summary_match_limit: int = 5
    summary_gap_limit: int = 5
    occupational_match_prompts: int = 3
    occupational_gap_prompts: int = 2
    max_occupational_questions: int = 6
    behavioral_questions: tuple[str, ...] = BEHAVIORAL_QUESTIONS

    def with_stopwords(
        self,
        *,
        extra: Iterable[str] = (),
        remove: Iterable[str] = (),
        version: str | None = None,
    ) -> "ExplainConfig":
        added = {word.strip().lower() for word in extra if word and word.strip()}
        removed = {word.strip().lower() for word in remove if word and word.strip()}
        return replace(
            self,
            stopwords=frozenset((self.stopwords | added) - removed),
            stopwords_version=version or self.stopwords_version,
        )


DEFAULT_EXPLAIN_CONFIG = ExplainConfig()
