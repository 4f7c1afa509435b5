"""
docsearch/cli.py

Command line front end.

    docsearch index  <folder> [--output index.json] [--workers N]
    docsearch check  <index-file>
    docsearch search <index-file> <query...> [--top K]
    docsearch serve  <index-file> [address]
"""

from __future__ import annotations
import sys
import argparse

from docsearch.codec import load_index, save_index
from docsearch.errors import DocSearchError
from docsearch.indexer import build_index
from docsearch.parser import iter_documents
from docsearch.paths import INDEX_PATH, DEFAULT_ADDRESS, DEFAULT_TOPK, FRONTEND_DIR
from docsearch.searcher import Searcher


def cmd_index(args) -> int:
    index = build_index(iter_documents(args.folder), workers=args.workers)
    save_index(index, args.output)
    return 0


def cmd_check(args) -> int:
    index = load_index(args.index_file)
    print(f"{args.index_file} contains {len(index)} files")
    return 0


def cmd_search(args) -> int:
    index = load_index(args.index_file)
    query = " ".join(args.query)
    results = Searcher(index).search(query, topk=args.top)
    for rank, (docid, score) in enumerate(results, start=1):
        print(f"{rank:>3}. {docid} => {score:.6f}")
    return 0


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def parse_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"address must look like HOST:PORT, got {address!r}")
    return host, int(port)


def cmd_serve(args) -> int:
    # imported here so index/check/search do not pay for Flask
    from docsearch.app import create_app

    try:
        host, port = parse_address(args.address)
    except ValueError as e:
        print(f"ERROR: could not start HTTP server at {args.address}: {e}", file=sys.stderr)
        return 1

    searcher = Searcher(load_index(args.index_file))
    app = create_app(searcher, frontend_dir=args.frontend)
    print(f"listening to http://{host}:{port}/")
    app.run(host=host, port=port)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="docsearch", description="TF-IDF document search engine.")
    sub = ap.add_subparsers(dest="command", metavar="SUBCOMMAND")

    p = sub.add_parser("index", help="index <folder> and save the index to a JSON file")
    p.add_argument("folder", help="directory to index recursively")
    p.add_argument("--output", default=INDEX_PATH, help=f"index file to write (default: {INDEX_PATH})")
    p.add_argument("--workers", type=int, default=1, help="#processes used for tokenization")
    p.set_defaults(func=cmd_index)

    p = sub.add_parser("check", help="report how many documents an index file holds")
    p.add_argument("index_file")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("search", help="rank the indexed documents against a query")
    p.add_argument("index_file")
    p.add_argument("query", nargs="+", help="free text query")
    p.add_argument("--top", type=positive_int, default=DEFAULT_TOPK, help="number of results to print")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("serve", help="start the local HTTP server with web interface")
    p.add_argument("index_file")
    p.add_argument("address", nargs="?", default=DEFAULT_ADDRESS, help=f"HOST:PORT (default: {DEFAULT_ADDRESS})")
    p.add_argument("--frontend", default=FRONTEND_DIR, help="directory holding index.html and index.js")
    p.set_defaults(func=cmd_serve)

    return ap


def main(argv=None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    if args.command is None:
        ap.print_usage(sys.stderr)
        print("ERROR: no subcommand is provided", file=sys.stderr)
        return 1

    try:
        return args.func(args)
    except DocSearchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
