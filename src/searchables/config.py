from __future__ import annotations
import os

# Scoring weights (per scanned candidate character)
MATCH_BONUS: int = 10
CONTIGUITY_BONUS: int = 5
GAP_PENALTY: int = 1

# Floor for a full subsequence match whose points went non-positive
MIN_MATCH_SCORE: int = 1

# /* ~~~ memoized queries per session; None = unbounded ~~~ */
CACHE_MAX_ENTRIES: int | None = 1024

# Paging ("show N more")
MAX_VISIBLE_ITEMS: int = 50
MAX_PAGE_SIZE: int = 500

# Inline choice lists: "Apple, Banana; Grape"
CHOICE_SEPARATORS: str = ",;"

# file types scanned when a directory is given as a choice source
INCLUDE_EXTS = [".txt"]

# Progress logging (set SEARCHABLES_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SEARCHABLES_VERBOSE") == "1"
