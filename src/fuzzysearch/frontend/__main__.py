from __future__ import annotations
import argparse, json, sys
from fuzzysearch import Engine, InvalidInput
from fuzzysearch.config import DEFAULT_RELEVANCE, TOP_K
from fuzzysearch.records import as_plain


def _row_json(hit) -> dict:
    row = hit.as_dict()
    row["record"] = as_plain(hit.record)
    return row


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fuzzy search CLI (Engine-backed)")
    p.add_argument("--data", nargs="+", required=True, help="Record files (.json/.jsonl/.csv) or folders")
    p.add_argument("--fields", nargs="+", required=True, help="Fields to search in every record")
    p.add_argument("-q", "--q", default=None, help="Single query to run once")
    p.add_argument("--relevance", type=int, default=DEFAULT_RELEVANCE, help="1..100, higher is stricter")
    p.add_argument("--limit", type=int, default=TOP_K, help="Max results per page")
    p.add_argument("--offset", type=int, default=0)
    p.add_argument("--skip", nargs="+", default=[], help="Words never matched")
    p.add_argument("--collection", nargs="+", default=None, help="Restrict to these collections")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine(skip=args.skip, verbose=args.verbose)
    try:
        eng.load(args.data, args.fields)

        def run_query(q: str):
            hits = eng.find(
                q,
                relevance=args.relevance,
                limit=args.limit,
                offset=args.offset,
                collections=args.collection,
            )
            if args.json:
                print(json.dumps([_row_json(h) for h in hits], ensure_ascii=False, indent=2, default=str))
                return
            if not hits:
                print("(no matches)"); return
            print("#  Score  Collection       Key      Record")
            for i, h in enumerate(hits, 1 + args.offset):
                rec = json.dumps(as_plain(h.record), ensure_ascii=False, default=str)
                print(f"{i:<2} {h.score:<6} {h.collection:<16} {str(h.key):<8} {rec}")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    except InvalidInput as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
