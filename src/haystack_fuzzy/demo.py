# src/haystack_fuzzy/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _load_source(args: argparse.Namespace):
    """Does: Build the pool from --source (JSON via the config loader) or the positional candidates."""
    if args.source:
        from .matching.utils import load_config

        path = Path(args.source).expanduser().resolve()
        return load_config(path.name, mode="raw", base_dir=path.parent)
    if args.delimiter is not None:
        from .matching import tokenize

        return [tok for cand in args.candidates for tok in tokenize(cand, args.delimiter)]
    return list(args.candidates)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="haystack-demo",
        description="Fuzzy-search a query against candidate strings.",
    )
    parser.add_argument("query", help="Query to search for (e.g. jan)")
    parser.add_argument(
        "candidates",
        nargs="*",
        help="Candidate strings (e.g. January February March)",
    )
    parser.add_argument("--source", help="JSON file (.json) holding a list or nested object of candidates")
    parser.add_argument("--delimiter", help="Split each candidate on this delimiter")
    parser.add_argument("--limit", type=int, default=1, help="Max results to return")
    parser.add_argument("--flexibility", type=int, default=None, help="Max edit distance (0 = exact)")
    parser.add_argument("--case-sensitive", action="store_true", default=None, dest="case_sensitive")
    parser.add_argument("--ignore-stop-words", action="store_true", default=None, dest="ignore_stop_words")
    parser.add_argument("--stemming", action="store_true", default=None)
    parser.add_argument("--stemmer", choices=["porter", "plural"], default="porter")
    parser.add_argument("--exclude", action="append", default=None, dest="exclusions",
                        help="Substring removed from the query (repeatable)")
    parser.add_argument("--options", help="Name of a JSON options file in the config dir")
    parser.add_argument("--debug", action="store_true", help="Trace pipeline stages to stderr")
    return parser


def main(argv=None) -> int:
    """CLI demo: search candidates for a query and print the ranked JSON result list."""
    from .matching import Haystack, SearchOptions
    from .matching.token import get_stemmer

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        "case_sensitive": args.case_sensitive,
        "flexibility": args.flexibility,
        "exclusions": args.exclusions,
        "ignore_stop_words": args.ignore_stop_words,
        "stemming": args.stemming,
    }

    try:
        base = SearchOptions.from_file(args.options) if args.options else SearchOptions()
        haystack = Haystack(base.with_overrides(overrides), stemmer=get_stemmer(args.stemmer))
        source = _load_source(args)
        result = haystack.search(args.query, source, args.limit, debug=args.debug)
    except (OSError, ValueError, TypeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
