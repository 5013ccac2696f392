from __future__ import annotations
import argparse
import logging
import os

from flask import Flask, request, jsonify

from backend.engine import Engine
from backend.errors import CorpusLoadError, InvalidQuery, PatternCompileError
from backend import config as CFG

log = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")
_engine: Engine | None = None


def _flag(name: str) -> bool:
    return request.args.get(name, "", type=str) == "on"


def _bad_request(msg: str):
    log.info("Rejected %s: %s", request.path, msg)
    return msg, 400


def _not_ready():
    return "corpus not loaded", 503


# ---------- API ----------
@app.get("/search")
def api_search():
    if _engine is None or _engine.index is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    if not q:
        return _bad_request("missing search query in URL params")
    try:
        results = _engine.search_query(q, case_sensitive=_flag("cs"), whole_word=_flag("ww"))
    except (InvalidQuery, PatternCompileError) as exc:
        return _bad_request(str(exc))
    return jsonify(results)


@app.get("/suggest")
def api_suggest():
    if _engine is None or _engine.index is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    if not q:
        return _bad_request("missing search query in URL params")
    try:
        results = _engine.suggest_query(q)
    except (InvalidQuery, PatternCompileError) as exc:
        return _bad_request(str(exc))
    return jsonify(results)


@app.get("/health")
def health():
    loaded = _engine is not None and _engine.index is not None
    return jsonify({"ok": loaded, "corpus_bytes": _engine.corpus_size if loaded else 0})


# ---------- UI ----------
@app.get("/")
def home():
    return app.send_static_file("index.html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve corpus search over HTTP")
    ap.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Corpus file (env CORPUS_PATH)")
    ap.add_argument("--host", default="0.0.0.0")
    ap.add_argument("--port", type=int, default=CFG.PORT, help="Port (env PORT)")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.load(args.corpus, verbose=args.verbose or CFG.VERBOSE)
    except CorpusLoadError as exc:
        log.error("%s", exc)
        return 1

    print(f"Listening on port {args.port}...")
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
