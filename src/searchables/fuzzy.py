from __future__ import annotations
import string
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar
from . import config as CFG

T = TypeVar("T")

# ASCII-only case fold: 'A'..'Z' -> 'a'..'z', everything else untouched
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(s: str) -> str:
    """Lowercase ASCII letters only (no locale / Unicode case mapping)."""
    return s.translate(_ASCII_FOLD)


def _score_folded(item: str, query: str) -> int:
    score = 0
    qi = 0
    qn = len(query)
    for ch in item:
        if qi < qn and ch == query[qi]:
            score += CFG.MATCH_BONUS
            qi += 1
            # flat bonus: fires on every match, adjacent or not
            score += CFG.CONTIGUITY_BONUS
        else:
            score -= CFG.GAP_PENALTY

    if qi != qn:
        return 0
    return max(score, CFG.MIN_MATCH_SCORE)


def score(candidate: str, query: str) -> int:
    """
    /* ~~~ Relevance of candidate for query; 0 means "no match". ~~~ */

    Greedy left-to-right subsequence scan, case-insensitive (ASCII fold).
    Every matched char earns MATCH_BONUS + CONTIGUITY_BONUS, every other
    scanned char costs GAP_PENALTY. If the query is not a subsequence of the
    candidate the result is 0; otherwise it is at least MIN_MATCH_SCORE.
    """
    return _score_folded(fold(candidate), fold(query))


def rank(candidates: Iterable[str], query: Optional[str]) -> List[Tuple[str, Optional[int]]]:
    """
    Score, filter and order candidates, keeping the scores.
    Ties keep input order (sorted() is stable).
    Empty / None query -> every candidate in input order with score None, like search().
    """
    if not query:
        return [(item, None) for item in candidates]
    q = fold(query)
    rows: List[Tuple[str, Optional[int]]] = []
    for item in candidates:
        sc = score(item, q)
        if sc > 0:
            rows.append((item, sc))
    rows.sort(key=lambda r: r[1], reverse=True)
    return rows


def search(candidates: Iterable[str], query: Optional[str]) -> List[str]:
    """
    Filter and rank candidates for query.

    Empty / None query -> every candidate, original order, nothing scored.
    Otherwise -> candidates with score > 0, highest score first, stable on ties.
    The input is never mutated; the returned list is new.
    """
    if not query:
        return list(candidates)
    return [item for item, _ in rank(candidates, query)]


def paginate(results: Sequence[T], page: int = 0, page_size: Optional[int] = None) -> List[T]:
    """Return the 0-based `page` of `results` (MAX_VISIBLE_ITEMS per page by default); [] past the end."""
    if page_size is None:
        page_size = CFG.MAX_VISIBLE_ITEMS
    if page < 0:
        raise ValueError(f"page must be >= 0, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = page * page_size
    return list(results[start:start + page_size])
