from .composer import build_occupational_questions, build_summary, explain, partition_keywords
from .config import (
    BEHAVIORAL_QUESTIONS,
    DEFAULT_EXPLAIN_CONFIG,
    SHORT_TOKENS,
    STOPWORDS,
    STOPWORDS_VERSION,
    ExplainConfig,
)
from .evidence import RESUME_SOURCE, clip_evidence_text, locate_evidence
from .ranking import KeywordStat, build_frequency_table, rank_keywords
from .scoring import overlap_score
from .text import normalize_text, split_sentences
from .tokenize import tokenize

__all__ = [
    "explain",
    "ExplainConfig",
    "DEFAULT_EXPLAIN_CONFIG",
    "STOPWORDS",
    "STOPWORDS_VERSION",
    "SHORT_TOKENS",
    "BEHAVIORAL_QUESTIONS",
    "normalize_text",
    "split_sentences",
    "tokenize",
    "KeywordStat",
    "build_frequency_table",
    "rank_keywords",
    "overlap_score",
    "RESUME_SOURCE",
    "clip_evidence_text",
    "locate_evidence",
    "partition_keywords",
    "build_summary",
    "build_occupational_questions",
]
