"""
Flask JSON API over one shared Engine.

All HTTP clients share a single IncrementalSearch session. Results stay
correct for interleaved clients (Engine serializes calls), but one client's
keystrokes replace the "last query" of another, so single-append narrowing
only helps while one client is typing. Run one process per user (or key
sessions per client) if that matters.
"""
from __future__ import annotations
import argparse
from flask import Flask, request, jsonify
from searchables.engine import Engine
from searchables.loader import parse_choices
from searchables import config as CFG

app = Flask(__name__)
_engine: Engine = Engine()

def _bad_request(msg: str):
    return jsonify({"error": msg}), 400

# ---------- API ----------
@app.get("/api/search")
def api_search():
    q = request.args.get("q", "", type=str)
    page = request.args.get("page", 0, type=int)
    k = request.args.get("k", CFG.MAX_VISIBLE_ITEMS, type=int)
    if page < 0:
        return _bad_request("page must be >= 0")
    k = max(1, min(k, CFG.MAX_PAGE_SIZE))
    result = _engine.complete(q, page=page, page_size=k)
    return jsonify(result.to_dict())

@app.get("/api/choices")
def api_get_choices():
    return jsonify(list(_engine.choices))

@app.put("/api/choices")
def api_put_choices():
    body = request.get_json(silent=True)
    if isinstance(body, dict) and isinstance(body.get("choices"), str):
        items = parse_choices(body["choices"])
    elif isinstance(body, list) and all(isinstance(c, str) for c in body):
        items = body
    else:
        return _bad_request("expected a JSON list of strings or {\"choices\": \"a, b; c\"}")
    _engine.set_choices(items)
    return jsonify({"ok": True, "choices": len(_engine.choices)})

@app.get("/health")
def health():
    return jsonify({"ok": True, "choices": len(_engine.choices), "cached_queries": _engine.cached_queries})

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the fuzzy choice search API with Flask")
    ap.add_argument("--roots", nargs="+", default=[])
    ap.add_argument("--choices", default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if not args.roots and args.choices is None:
        ap.error("give --roots and/or --choices")

    global _engine
    _engine = Engine()
    _engine.build(roots=args.roots, choices=args.choices, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
