# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""owlim — command-line front end for the repository client.

Endpoint resolution: --endpoint, then --config, then OWLIM_ENDPOINT
(read from the environment or a .env file).

Usage:
    owlim --endpoint http://localhost:8080/openrdf-sesame list
    owlim create books --label "Book catalogue"
    owlim import books data/*.ttl
    owlim query books "select * where { ?s ?p ?o } limit 10"
    owlim head books --offset 5 --limit 10
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from owlim.client import RepositoryClient
from owlim.config import (
    ClientConfig,
    CreateOptions,
    Endpoint,
    ExportOptions,
    HeadOptions,
    ImportOptions,
    QueryOptions,
    load_config,
)
from owlim.logger import ImportSummary, get_logger
from owlim.result import Fail, FailKind, Ok, Result

log = get_logger("owlim")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="owlim",
        description="Administer and query an OWLIM/Sesame triplestore over HTTP",
    )
    parser.add_argument("--endpoint", help="Store URL, e.g. http://localhost:8080/openrdf-sesame")
    parser.add_argument("--config", type=Path, help="YAML client config")
    parser.add_argument(
        "--no-default-prefixes",
        action="store_true",
        help="Do not prepend the built-in PREFIX declarations to queries",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List repository IDs")

    p = sub.add_parser("create", help="Create a repository")
    p.add_argument("repository")
    p.add_argument("--label", default="")
    p.add_argument("--namespace", default="")
    p.add_argument("--base-url", default="")
    p.add_argument("--license", default="")

    p = sub.add_parser("import", help="Import RDF files")
    p.add_argument("repository")
    p.add_argument("files", nargs="+", type=Path)
    p.add_argument("--format", help="Format token (ttl, rdf, n3, nt, trix, trig, rdfbin)")
    p.add_argument("--content-type", help="Explicit Content-Type, overrides --format")

    p = sub.add_parser("export", help="Export all statements")
    p.add_argument("repository")
    p.add_argument("--format", help="Format token (default: RDF/XML)")
    p.add_argument("--output", type=Path, help="Write to file instead of stdout")

    for name in ("size", "clear", "drop"):
        p = sub.add_parser(name, help=f"{name.capitalize()} a repository")
        p.add_argument("repository")

    p = sub.add_parser("query", help="Run a SPARQL query")
    p.add_argument("repository")
    p.add_argument("sparql", nargs="?", help="Query text")
    p.add_argument("--file", type=Path, help="Read the query from a file")
    _add_query_flags(p)

    p = sub.add_parser("find", help="Statements of subjects having a literal keyword")
    p.add_argument("repository")
    p.add_argument("keyword")
    _add_query_flags(p)

    p = sub.add_parser("head", help="Browse a page of statements")
    p.add_argument("repository")
    p.add_argument("--limit", type=int, default=20)
    p.add_argument("--offset", type=int, default=1)
    _add_query_flags(p)

    return parser


def _add_query_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", choices=("tabular", "json", "xml"), default="tabular")
    p.add_argument("--infer", action="store_true", help="Include inferred statements")


def _resolve_config(args: argparse.Namespace) -> Result[ClientConfig]:
    if args.config:
        loaded = load_config(args.config)
        if not loaded.ok or not args.endpoint:
            return loaded
        base = loaded.data
    else:
        base = None

    url = args.endpoint or os.environ.get("OWLIM_ENDPOINT")
    if not url:
        return Fail(
            error="No endpoint: pass --endpoint, --config or set OWLIM_ENDPOINT",
            kind=FailKind.CONFIG,
        )
    try:
        endpoint = Endpoint.from_url(url)
    except ValueError as exc:
        return Fail(error=str(exc), kind=FailKind.CONFIG)

    if base is None:
        return Ok(data=ClientConfig(endpoint=endpoint))
    return Ok(data=replace(base, endpoint=endpoint))


def _write_stream(result: Result) -> Result:
    if not result.ok:
        return result
    out = sys.stdout.buffer
    for chunk in result.data:
        out.write(chunk)
    out.flush()
    return Ok(data=None)


def _import_files(client: RepositoryClient, args: argparse.Namespace) -> Result:
    options = ImportOptions(content_type=args.content_type, format=args.format)
    summary = ImportSummary()

    for path in args.files:
        log.info("── Import: %s ──", path)
        result = client.import_file(args.repository, path, options)
        summary.record(result)
        if not result.ok:
            log.warning("Import of %s failed: %s", path, result.error)

    log.info(summary.report())
    if summary.failed:
        return Fail(
            error=f"{summary.failed} of {len(args.files)} imports failed",
            kind=summary.first_failure,
        )
    return Ok(data=None)


def _run(client: RepositoryClient, args: argparse.Namespace) -> Result:
    command = args.command

    if command == "list":
        result = client.list()
        if result.ok:
            print("\n".join(result.data))
        return result

    if command == "create":
        options = CreateOptions(
            repository_label=args.label,
            default_namespace=args.namespace,
            base_url=args.base_url,
            license=args.license,
        )
        return client.create(args.repository, options)

    if command == "import":
        return _import_files(client, args)

    if command == "export":
        result = client.export(args.repository, ExportOptions(format=args.format))
        if result.ok:
            if args.output:
                args.output.write_bytes(result.data)
                log.info("Wrote %d bytes to %s", len(result.data), args.output)
            else:
                sys.stdout.buffer.write(result.data)
        return result

    if command == "size":
        result = client.size(args.repository)
        if result.ok:
            print(result.data)
        return result

    if command == "clear":
        return client.clear(args.repository)

    if command == "drop":
        return client.drop(args.repository)

    if command == "query":
        if args.file:
            try:
                sparql = args.file.read_text(encoding="utf-8")
            except OSError as exc:
                return Fail(error=f"Cannot read {args.file}: {exc}", kind=FailKind.IO)
        elif args.sparql:
            sparql = args.sparql
        else:
            return Fail(error="query needs SPARQL text or --file", kind=FailKind.CONFIG)
        options = QueryOptions(format=args.format, infer=args.infer)
        return _write_stream(client.stream(args.repository, sparql, options))

    if command == "find":
        options = QueryOptions(format=args.format, infer=args.infer)
        return _write_stream(client.find_stream(args.repository, args.keyword, options))

    if command == "head":
        options = HeadOptions(
            format=args.format, infer=args.infer, limit=args.limit, offset=args.offset
        )
        return _write_stream(client.head_stream(args.repository, options))

    return Fail(error=f"Unknown command: {command}", kind=FailKind.CONFIG)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    cfg_result = _resolve_config(args)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    config = cfg_result.data
    if args.no_default_prefixes:
        config = replace(config, default_prefixes=False)

    client = RepositoryClient.from_config(config)
    log.info("Endpoint: %s", client.host())

    result = _run(client, args)
    if not result.ok:
        log.error("%s failed: %s", args.command, result.error)
        if result.context:
            log.error("%s", result.context)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
