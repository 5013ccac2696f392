from __future__ import annotations
import argparse, json, sys
from backend import Engine
from backend import config as CFG
from backend.errors import CorpusLoadError, InvalidQuery, PatternCompileError


def _print_rows(rows: list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    if not rows:
        print("(no matches)"); return
    for i, r in enumerate(rows, 1):
        print(f"--- {i} ---")
        print(r)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Corpus search CLI (Engine-backed)")
    p.add_argument("--corpus", default=CFG.CORPUS_PATH, help="Corpus file (env CORPUS_PATH)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--q", default=None, help="Search query to run once (spaces separate terms)")
    g.add_argument("--suggest", default=None, help="Prefix to autocomplete once")
    p.add_argument("--cs", action="store_true", help="Case-sensitive search")
    p.add_argument("--ww", action="store_true", help="Whole-word search")
    p.add_argument("--json", action="store_true", help="Emit JSON list")
    p.add_argument("--repl", action="store_true", help="Interactive loop after load")
    p.add_argument("--serve", action="store_true", help="Run the HTTP front end")
    p.add_argument("--port", type=int, default=CFG.PORT)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.serve:
        from frontend import web
        web_argv = ["--corpus", args.corpus, "--port", str(args.port)]
        if args.verbose:
            web_argv.append("--verbose")
        return web.main(web_argv)

    eng = Engine()
    try:
        eng.load(args.corpus, verbose=args.verbose or CFG.VERBOSE)
    except CorpusLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    def run(q: str, suggest: bool = False) -> bool:
        try:
            if suggest:
                rows = eng.suggest_query(q)
            else:
                rows = eng.search_query(q, case_sensitive=args.cs, whole_word=args.ww)
        except (InvalidQuery, PatternCompileError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return False
        _print_rows(rows, args.json)
        return True

    try:
        ok = True
        if args.q is not None:
            ok = run(args.q)
        if args.suggest is not None:
            ok = run(args.suggest, suggest=True)

        if args.repl:
            print("Type a query (empty line to exit). Prefix with '?' to autocomplete.")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q.strip():
                    break
                if q.startswith("?"):
                    run(q[1:], suggest=True)
                else:
                    run(q)
        return 0 if ok else 2
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
