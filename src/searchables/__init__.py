"""
Searchables Module

Fuzzy filtering and ranking of a choice list for search-as-you-type inputs
(searchable dropdowns, command pickers). A query matches a choice when its
characters appear in the choice in order (case-insensitive); shorter choices
rank higher, and ties keep the caller's order.

The module is designed with a clean separation of concerns:
- Scoring and ranking (pure functions)
- An incremental cache for continuous typing
- Choice loading and paging helpers
- An Engine that ties them together for the CLI and the web API

Main Functions:
    score(candidate, query): relevance of one choice (0 = no match)
    search(candidates, query): filtered, ranked list of choices
    IncrementalSearch(candidates).query(q): cached search for one typing session

Example Usage:
    from searchables import IncrementalSearch

    picker = IncrementalSearch(["Apple", "Banana", "Grape", "Pineapple"])
    for q in ("a", "ap", "app"):
        print(q, picker.query(q))

    picker.set_candidates(["Cherry", "Plum"])   # new list -> cache dropped

Author: Google Team 4
Version: 1.0.0
"""

# src/searchables/__init__.py
from .fuzzy import score, search, rank, paginate  # re-export
from .incremental import IncrementalSearch
from .engine import Engine
from .loader import load_choices, parse_choices
from .models import ScoredChoice, SearchPage, CacheStats

__version__ = "1.0.0"
__author__ = "Google Team 4"
__all__ = [
    "score", "search", "rank", "paginate",
    "IncrementalSearch", "Engine",
    "load_choices", "parse_choices",
    "ScoredChoice", "SearchPage", "CacheStats",
]
