# Copyright 2026 by Hans Meine, licensed under the Apache License 2.0
"""CLI for reading and editing JSON documents with dot-notation key paths."""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .json_object import JSONObject

__all__ = ["load_documents", "fetch_document", "run_command", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Get, test, set or delete values in JSON documents by dot-separated key path."
    )
    parser.add_argument(
        "command",
        choices=("get", "has", "set", "delete"),
        help="Operation to perform on each document",
    )
    parser.add_argument("path", type=str, help="Dot-separated key path, e.g. attributes.title")
    parser.add_argument(
        "value",
        type=str,
        nargs="?",
        help="New value for 'set', parsed as JSON unless --string is given",
    )
    parser.add_argument(
        "--string",
        dest="as_string",
        action="store_true",
        help="Store VALUE as a literal string instead of parsing it as JSON",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="json_file",
        type=Path,
        help="Path to the JSON file to read (default: stdin)",
    )
    parser.add_argument(
        "--ndjson",
        action="store_true",
        help="Treat the input as newline-delimited JSON, one document per line",
    )
    parser.add_argument("--output", "-o", type=Path, help="Output file for 'set' and 'delete'")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print output with the given indent (ignored with --ndjson)",
    )

    http_group = parser.add_argument_group(
        "HTTP access",
        "Fetch the document from a URL instead of --file",
    )
    http_group.add_argument(
        "--url",
        dest="url",
        type=str,
        help="URL to GET the JSON document from",
    )
    http_group.add_argument(
        "--bearer",
        dest="bearer",
        type=str,
        help="Bearer token sent with --url "
        "(can also be set via DOTTED_JSON_BEARER environment variable)",
    )
    return parser


def _parse_value(text: str, as_string: bool = False):
    if as_string:
        return text
    try:
        return json.loads(text)
    except ValueError as e:
        raise ValueError(f"VALUE is not valid JSON: {text!r} (use --string for plain text)") from e


def load_documents(lines: Iterable[str], *, ndjson: bool = False) -> list[JSONObject]:
    """Parse input text into JSON objects.

    Without `ndjson` the whole input is a single document.  Input that is not
    a JSON object raises ValueError, since a silently emptied document would
    be written back by 'set' and 'delete'.
    """
    chunks = [line for line in lines if line.strip()] if ndjson else ["\n".join(lines)]
    documents = []
    for lineno, chunk in enumerate(chunks, 1):
        try:
            parsed = json.loads(chunk)
        except ValueError as e:
            where = f"line {lineno}" if ndjson else "input"
            raise ValueError(f"{where} is not valid JSON: {e}") from e
        if not isinstance(parsed, dict):
            raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
        documents.append(JSONObject(parsed))
    return documents


def fetch_document(*, url: str, bearer_token: str | None) -> Iterable[str]:
    """Stream a JSON (or NDJSON) document from a URL."""

    import requests

    headers = {"Accept": "application/json"}
    if bearer_token:
        headers["Authorization"] = f"Bearer {bearer_token}"
    response = requests.get(url, headers=headers, stream=True)
    response.raise_for_status()
    # without a declared charset iter_lines would yield bytes
    response.encoding = response.encoding or "utf-8"
    return response.iter_lines(decode_unicode=True)


def _dump(obj, *, ndjson: bool, indent: int | None) -> str:
    if isinstance(obj, JSONObject):
        obj = obj.to_dict()
    return json.dumps(obj, indent=None if ndjson else indent)


def run_command(
    documents: Sequence[JSONObject],
    command: str,
    path: str,
    value=None,
    *,
    ndjson: bool = False,
    indent: int | None = None,
) -> tuple[str, bool]:
    """Apply `command` to every document.

    Returns the text to write and whether every document had `path`
    ('get'/'has') or the command succeeded ('set'/'delete').
    """
    found_all = True
    results = []
    for document in documents:
        if command == "get":
            found = document.contains_key(path)
            results.append(_dump(document.get(path), ndjson=ndjson, indent=indent))
        elif command == "has":
            found = document.contains_key(path)
            results.append(json.dumps(found))
        else:
            document.put(path, value if command == "set" else None)
            found = True
            results.append(_dump(document, ndjson=ndjson, indent=indent))
        found_all = found_all and found
    return "\n".join(results) + "\n", found_all


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.json_file and args.url:
        parser.error("--file and --url are mutually exclusive")
    if args.command == "set" and args.value is None:
        parser.error("'set' requires a VALUE")
    if args.command != "set" and args.value is not None:
        parser.error(f"'{args.command}' does not take a VALUE")
    if args.output and args.command in ("get", "has"):
        parser.error("--output is only used with 'set' and 'delete'")

    try:
        value = _parse_value(args.value, args.as_string) if args.command == "set" else None
        if args.url:
            bearer = args.bearer or os.environ.get("DOTTED_JSON_BEARER")
            documents = load_documents(
                fetch_document(url=args.url, bearer_token=bearer), ndjson=args.ndjson
            )
        elif args.json_file:
            with args.json_file.open("r", encoding="utf-8") as fh:
                documents = load_documents(fh, ndjson=args.ndjson)
        else:
            documents = load_documents(sys.stdin, ndjson=args.ndjson)
    except ValueError as e:
        sys.stderr.write(f"ERROR: {e}\n")
        return 1

    output, ok = run_command(
        documents,
        args.command,
        args.path,
        value,
        ndjson=args.ndjson,
        indent=args.indent,
    )
    if args.output:
        args.output.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
