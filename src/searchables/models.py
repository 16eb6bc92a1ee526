# src/searchables/models.py
"""
Data models for the searchables core.

This module defines three small, focused data containers:

- ScoredChoice: one visible result row (choice, score, master-list index).
- SearchPage: one page of a ranked result, plus what is needed to ask for more.
- CacheStats: counters describing how an IncrementalSearch answered queries.

These classes do not contain matching logic; they only structure the data so
that scoring, ranking and caching remain simple and predictable.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class ScoredChoice:
    """
    A single result row.

    Attributes
    ----------
    choice : str
        The candidate string exactly as it appears in the candidate set.
    score : Optional[int]
        Relevance score from the fuzzy scorer. None when the query was empty
        (the empty query returns every candidate without scoring).
    index : int
        Position of the choice in the master candidate list (first occurrence),
        so a selection can be mapped back to the caller's own list.
    """
    choice: str
    score: Optional[int]
    index: int


@dataclass(slots=True)
class SearchPage:
    """
    One page of a ranked result.

    Attributes
    ----------
    query : str
        The raw query that produced the result.
    items : List[ScoredChoice]
        The rows of this page, in ranked order.
    total : int
        Number of matching candidates over all pages.
    page : int
        0-based page number.
    page_size : int
        Maximum number of rows per page.
    """
    query: str
    items: List[ScoredChoice] = field(default_factory=list)
    total: int = 0
    page: int = 0
    page_size: int = 0

    @property
    def has_more(self) -> bool:
        return (self.page + 1) * self.page_size < self.total

    def to_dict(self) -> dict:
        out = asdict(self)
        out["has_more"] = self.has_more
        return out


@dataclass(slots=True)
class CacheStats:
    hits: int = 0
    misses: int = 0
    narrowed: int = 0      # misses answered from the previous result
    full_scans: int = 0    # misses answered from the full candidate set
    evictions: int = 0

    def reset(self) -> None:
        self.hits = self.misses = self.narrowed = self.full_scans = self.evictions = 0
