from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(slots=True)
class KeywordStat:
    token: str
    count: int
    first_index: int


def build_frequency_table(tokens: Iterable[str]) -> dict[str, KeywordStat]:
    table: dict[str, KeywordStat] = {}
    for index, token in enumerate(tokens):
        stat = table.get(token)
        if stat is None:
            table[token] = KeywordStat(token=token, count=1, first_index=index)
        else:
            stat.count += 1
    return table


def rank_keywords(tokens: Iterable[str], limit: int) -> list[str]:
    """Top ``limit`` tokens by descending count, ties by first occurrence.

    The tie-break is part of the sort key so the ranking does not depend on
    dict iteration order. With short job descriptions most tokens appear
    once and the first-occurrence order decides which of them make the cut.
    """
    if limit <= 0:
        return []
    table = build_frequency_table(tokens)
    ranked = sorted(table.values(), key=lambda stat: (-stat.count, stat.first_index))
    return [stat.token for stat in ranked[:limit]]
