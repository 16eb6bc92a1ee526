# src/searchables/incremental.py
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Iterable, Optional, Tuple, List

from . import config as CFG
from . import fuzzy
from .models import CacheStats

log = logging.getLogger(__name__)

_UNSET = object()


def is_single_append(previous: Optional[str], query: str) -> bool:
    """True iff `query` is `previous` plus exactly one trailing character."""
    if previous is None:
        return False
    return len(query) == len(previous) + 1 and query.startswith(previous)


class IncrementalSearch:
    """
    Search-as-you-type over one candidate set.

    Holds the session state for a single input stream:
      - memo:        exact query -> ranked result (no-match results included)
      - last query / last result: what the previous call returned

    A miss whose query extends the last query by one trailing character only
    rescans the last result: a candidate that does not contain the shorter
    query as a subsequence cannot contain the longer one. Any other edit
    (backspace, paste, restart) rescans the full candidate set.

    Not thread-safe: one caller at a time per instance.
    """

    # ------------- lifecycle -------------

    def __init__(self, candidates: Optional[Iterable[str]] = None, *, max_entries=_UNSET) -> None:
        self._candidates: Tuple[str, ...] = ()
        self._memo: "OrderedDict[str, Tuple[str, ...]]" = OrderedDict()
        self._last_query: Optional[str] = None
        self._last_result: Optional[Tuple[str, ...]] = None
        self.max_entries: Optional[int] = CFG.CACHE_MAX_ENTRIES if max_entries is _UNSET else max_entries
        if self.max_entries is not None and self.max_entries < 1:
            raise ValueError(f"max_entries must be >= 1 or None, got {self.max_entries}")
        self.stats = CacheStats()
        if candidates is not None:
            self.set_candidates(candidates)

    @property
    def candidates(self) -> Tuple[str, ...]:
        return self._candidates

    @property
    def last_query(self) -> Optional[str]:
        return self._last_query

    def set_candidates(self, candidates: Iterable[str]) -> None:
        """Bind a new candidate set. Every cached result is dropped."""
        self._candidates = tuple(candidates)
        self.reset()
        log.info("Candidate set replaced: %d choices", len(self._candidates))

    def reset(self) -> None:
        """End the session: forget memoized results and the last query."""
        self._memo.clear()
        self._last_query = None
        self._last_result = None
        self.stats.reset()

    # ------------- query -------------

    def query(self, query: Optional[str]) -> List[str]:
        if not query:
            self._remember("", self._candidates)
            return list(self._candidates)

        hit = self._memo.get(query)
        if hit is not None:
            self._memo.move_to_end(query)
            self.stats.hits += 1
            log.debug("cache hit %r (%d results)", query, len(hit))
            self._remember(query, hit)
            return list(hit)

        self.stats.misses += 1
        if self._last_result is not None and is_single_append(self._last_query, query):
            domain = self._last_result
            self.stats.narrowed += 1
        else:
            domain = self._candidates
            self.stats.full_scans += 1

        result = tuple(fuzzy.search(domain, query))
        log.debug("cache miss %r: scanned %d, kept %d", query, len(domain), len(result))
        self._store(query, result)
        self._remember(query, result)
        return list(result)

    # ------------- introspection -------------

    def __len__(self) -> int:
        return len(self._memo)

    def __contains__(self, query: object) -> bool:
        return query in self._memo

    # ------------- internals -------------

    def _remember(self, query: str, result: Tuple[str, ...]) -> None:
        self._last_query = query
        self._last_result = result

    def _store(self, query: str, result: Tuple[str, ...]) -> None:
        self._memo[query] = result
        if self.max_entries is not None:
            while len(self._memo) > self.max_entries:
                evicted, _ = self._memo.popitem(last=False)
                self.stats.evictions += 1
                log.debug("cache evict %r", evicted)
