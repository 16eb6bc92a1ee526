from __future__ import annotations
import argparse, json, os, sys
from . import Engine
from . import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_page(page, start_rank: int = 1) -> None:
    if not page.items:
        print(_c("(no matches)", "2;37")); return
    print(_c("#    Score  Index  Choice", "1;37"))
    for i, r in enumerate(page.items, start=start_rank):
        sc = "-" if r.score is None else r.score
        print(f"{i:<4} {sc:<6} {r.index:<6} {r.choice}")
    shown = min(page.total, (page.page + 1) * page.page_size)
    more = "  (:more for next page)" if page.has_more else ""
    print(_c(f"{shown}/{page.total} shown{more}", "2;37"))

def _emit(page, as_json: bool) -> None:
    if as_json:
        print(json.dumps(page.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_page(page, start_rank=page.page * page.page_size + 1)

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fuzzy choice search (incremental, cache-backed)")
    p.add_argument("--roots", nargs="+", default=[], help="Files or folders of choices (one per line)")
    p.add_argument("--choices", default=None, help="Inline choices: 'Apple, Banana; Grape'")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--single-line", action="store_true", help="REPL: each line is a full query")
    p.add_argument("--page-size", type=int, default=CFG.MAX_VISIBLE_ITEMS)
    p.add_argument("--json", action="store_true", help="Emit JSON pages")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if not args.roots and args.choices is None:
        p.error("give --roots and/or --choices")
    if args.page_size < 1:
        p.error("--page-size must be >= 1")

    eng = Engine()
    try:
        eng.build(roots=args.roots, choices=args.choices, verbose=args.verbose)

        if args.q is not None:
            _emit(eng.complete(args.q, page_size=args.page_size), args.json)

        if args.repl:
            mode = "single-line" if args.single_line else "incremental"
            print(f"Type to search and press Enter (empty to quit).  Type '#' to reset the buffer.  [{mode} mode]")
            print(_c("Commands: :back, :more, :stats, :reset", "2;37"))
            buffer = ""
            page_no = 0
            while True:
                try:
                    raw = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                cmd = raw.strip().lower()
                if raw == "":
                    break
                if cmd in ("#", ":reset"):
                    buffer = ""; page_no = 0; print(_c("(reset)", "2;36")); continue
                if cmd == ":stats":
                    s = eng.stats
                    print(f"hits={s.hits} misses={s.misses} narrowed={s.narrowed} "
                          f"full_scans={s.full_scans} evictions={s.evictions} cached={eng.cached_queries}")
                    continue
                if cmd == ":more":
                    page_no += 1
                elif cmd == ":back":
                    buffer = buffer[:-1]; page_no = 0
                else:
                    buffer = raw if args.single_line else (buffer + raw)
                    page_no = 0
                print(_c(f"[query] {buffer!r}", "2;36"))
                _emit(eng.complete(buffer, page=page_no, page_size=args.page_size), args.json)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
