from __future__ import annotations
import logging
import os
import re
from typing import Iterable, List, Optional
from . import config as CFG

log = logging.getLogger(__name__)

# Progress logging cadence (only when SEARCHABLES_VERBOSE=1)
PROGRESS_EVERY_FILES = 500


def parse_choices(text: Optional[str]) -> List[str]:
    """
    Split an inline choice list on ',' / ';', trim each entry, drop empties.

        >>> parse_choices(" Apple, Banana;;Grape ,")
        ['Apple', 'Banana', 'Grape']
    """
    if not text:
        return []
    sep = "[" + re.escape(CFG.CHOICE_SEPARATORS) + "]"
    return [c.strip() for c in re.split(sep, text) if c.strip()]


def _iter_choice_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield files: plain file roots as-is, directories walked for INCLUDE_EXTS."""
    exts = tuple(e.lower() for e in CFG.INCLUDE_EXTS)
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            log.warning("Choice source not found, skipping: %s", root)
            continue
        found: List[str] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in filenames:
                if fn.lower().endswith(exts):
                    found.append(os.path.join(dirpath, fn))
        yield from sorted(found)


def load_choices(roots: Iterable[str]) -> List[str]:
    """
    Read choices from files, one per non-blank line (stripped).
    Order: files in the given / sorted order, then line order.
    """
    choices: List[str] = []
    file_count = 0
    for path in _iter_choice_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                for ln in f:
                    ln = ln.strip()
                    if ln:
                        choices.append(ln)
        except OSError as e:
            log.warning("Skipping unreadable file %s: %s", path, e)
            continue

        file_count += 1
        if CFG.VERBOSE and file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%s", f"{file_count:,}")

    log.info("Loaded %d choices from %d files", len(choices), file_count)
    return choices
