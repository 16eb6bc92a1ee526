# searchables/engine.py
from __future__ import annotations

import os
import logging
import threading
from typing import Dict, Iterable, List, Optional

from . import config as CFG
from .fuzzy import score, paginate
from .incremental import IncrementalSearch
from .loader import load_choices, parse_choices
from .models import CacheStats, ScoredChoice, SearchPage

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the master choice list (loaded from files and/or an inline string),
      - an IncrementalSearch session bound to that list,
      - paging and score/index annotation of results.

    Public API (used by CLI/Flask):
      * build(roots, choices=...): load -> bind candidates
      * set_choices(items):        replace candidates (drops the cache)
      * search(query):             ranked list of choice strings
      * complete(query, page=...): one SearchPage of annotated rows
      * shutdown():                forget everything

    Calls are serialized with a lock so a threaded host (Flask) can share one Engine.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._searcher = IncrementalSearch()
        self._positions: Dict[str, int] = {}
        self._lock = threading.Lock()

    # /* ~~~ Load choices from files and/or an inline list and bind them ~~~ */
    def build(
        self,
        roots: Iterable[str] = (),
        *,
        choices: Optional[str] = None,     # "Apple, Banana; Grape"
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["SEARCHABLES_VERBOSE"] = "1"

        roots = list(roots)
        if not roots and choices is None:
            raise ValueError("build(): at least one root or an inline choices string is required")

        items: List[str] = []
        if roots:
            log.info("Loading choices from %s", roots)
            items.extend(load_choices(roots))
        items.extend(parse_choices(choices))

        self.set_choices(items)
        log.info("Engine build() complete: choices=%d", len(items))

    def set_choices(self, items: Iterable[str]) -> None:
        items = list(items)
        positions: Dict[str, int] = {}
        for i, item in enumerate(items):
            positions.setdefault(item, i)
        with self._lock:
            self._searcher.set_candidates(items)
            self._positions = positions

    @property
    def choices(self) -> tuple[str, ...]:
        return self._searcher.candidates

    @property
    def stats(self) -> CacheStats:
        return self._searcher.stats

    @property
    def cached_queries(self) -> int:
        return len(self._searcher)

    # ------------- query -------------

    def search(self, query: Optional[str]) -> List[str]:
        with self._lock:
            return self._searcher.query(query)

    # /* ~~~ Run a query and return one page of annotated rows ~~~ */
    def complete(self, query: Optional[str], *, page: int = 0, page_size: Optional[int] = None) -> SearchPage:
        size = CFG.MAX_VISIBLE_ITEMS if page_size is None else int(page_size)
        # search + annotate under one lock so rows and indices come from the same choice list
        with self._lock:
            ranked = self._searcher.query(query)
            rows = paginate(ranked, page, size)
            positions = self._positions
        items = [
            ScoredChoice(
                choice=c,
                score=score(c, query) if query else None,
                index=positions.get(c, -1),
            )
            for c in rows
        ]
        return SearchPage(query=query or "", items=items, total=len(ranked), page=page, page_size=size)

    def index_of(self, choice: str) -> int:
        return self._positions.get(choice, -1)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        with self._lock:
            self._searcher.set_candidates(())
            self._positions = {}
        log.info("Engine shutdown complete")
