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

"""Repository client — administration and SPARQL over the store's HTTP API.

Composes the format registry, prefix table, result translator and
transaction builder with plain HTTP calls. Every operation returns
Result[T]; nothing is retried and nothing is rolled back.

    client = RepositoryClient.from_url("http://localhost:8080/openrdf-sesame")
    client.prefixes.load_defaults()
    result = client.query("books", "select * where { ?s ?p ?o } limit 5")
    if result.ok:
        print(result.data)
"""

from __future__ import annotations

from collections.abc import Iterator
from http.client import HTTPException
from pathlib import Path
from urllib.parse import quote_plus

from owlim.config import (
    DEFAULT_TIMEOUT,
    LONG_TIMEOUT,
    ClientConfig,
    CreateOptions,
    Endpoint,
    ExportOptions,
    HeadOptions,
    ImportOptions,
    QueryOptions,
)
from owlim.formats import resolve_export_type, resolve_import_type
from owlim.logger import get_logger
from owlim.prefixes import PrefixTable
from owlim.queries import find_query, head_query
from owlim.result import Fail, FailKind, Ok, Result
from owlim.results import binding_values, parse_results, render_table
from owlim.transactions import (
    TRANSACTION_TYPE,
    TRIX_TYPE,
    bnode_lookup_query,
    build_create,
    build_drop,
    extract_bnode,
    new_create_params,
)
from owlim.transport import iter_chunks, open_request, request

log = get_logger(__name__)

SPARQL_JSON = "application/sparql-results+json"
SPARQL_XML = "application/sparql-results+xml"

SYSTEM_STATEMENTS = "/repositories/SYSTEM/statements"

_RESULT_TYPES = {
    "tabular": SPARQL_JSON,
    "json": SPARQL_JSON,
    "xml": SPARQL_XML,
}


class RepositoryClient:
    """Client bound to one store endpoint."""

    def __init__(
        self,
        endpoint: Endpoint,
        timeout: int = DEFAULT_TIMEOUT,
        long_timeout: int = LONG_TIMEOUT,
        prefixes: PrefixTable | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.long_timeout = long_timeout
        self.prefixes = prefixes if prefixes is not None else PrefixTable()

    @classmethod
    def from_url(cls, url: str, **kwargs) -> RepositoryClient:
        return cls(Endpoint.from_url(url), **kwargs)

    @classmethod
    def from_config(cls, config: ClientConfig) -> RepositoryClient:
        prefixes = PrefixTable()
        if config.default_prefixes:
            prefixes.load_defaults()
        prefixes.update(config.prefixes)
        return cls(
            config.endpoint,
            timeout=config.timeout,
            long_timeout=config.long_timeout,
            prefixes=prefixes,
        )

    def host(self) -> str:
        return self.endpoint.url

    def _url(self, relative: str) -> str:
        return self.endpoint.resolve(relative)

    # ── Repository lifecycle ──────────────────────────────────

    def list(self) -> Result[list[str]]:
        """IDs of all repositories, SYSTEM included."""
        body = request(
            "GET",
            self._url("/repositories"),
            headers={"Accept": SPARQL_JSON},
            timeout=self.timeout,
        )
        if not body.ok:
            return body  # type: ignore[return-value]

        parsed = parse_results(body.data)
        if not parsed.ok:
            return parsed  # type: ignore[return-value]
        return Ok(data=binding_values(parsed.data, "id"))

    def create(self, repository_id: str, options: CreateOptions = CreateOptions()) -> Result[bytes]:
        transaction = build_create(new_create_params(repository_id, options))
        return request(
            "POST",
            self._url(SYSTEM_STATEMENTS),
            headers={"Content-Type": TRANSACTION_TYPE},
            body=transaction.encode("utf-8"),
            timeout=self.timeout,
        )

    def size(self, repository_id: str) -> Result[int]:
        body = request("GET", self._url(f"/repositories/{repository_id}/size"), timeout=self.timeout)
        if not body.ok:
            return body  # type: ignore[return-value]
        text = body.data.decode("utf-8", errors="replace").strip()
        try:
            return Ok(data=int(text))
        except ValueError:
            return Fail(error=f"Non-numeric size response: {text[:50]!r}", kind=FailKind.MALFORMED)

    def clear(self, repository_id: str) -> Result[bytes]:
        """Delete every statement in the repository."""
        return request(
            "DELETE",
            self._url(f"/repositories/{repository_id}/statements"),
            timeout=self.long_timeout,
        )

    def resolve_bnode(self, repository_id: str) -> Result[str]:
        """Blank node of the repository's configuration in SYSTEM."""
        body = request(
            "GET",
            self._url(f"{SYSTEM_STATEMENTS}?{bnode_lookup_query(repository_id)}"),
            headers={"Accept": TRIX_TYPE},
            timeout=self.timeout,
        )
        if not body.ok:
            return body  # type: ignore[return-value]

        bnode = extract_bnode(body.data)
        if not bnode.ok and bnode.kind is FailKind.NOT_FOUND:
            return Fail(
                error=f"No configuration found for repository '{repository_id}'",
                kind=FailKind.NOT_FOUND,
            )
        return bnode

    def drop(self, repository_id: str) -> Result[bytes]:
        """Clear the repository, then remove its configuration from SYSTEM.

        Not atomic: if the configuration cannot be resolved or removed, the
        data is already gone.
        """
        cleared = self.clear(repository_id)
        if not cleared.ok:
            return cleared

        bnode = self.resolve_bnode(repository_id)
        if not bnode.ok:
            log.warning("Repository '%s' cleared but not dropped: %s", repository_id, bnode.error)
            return bnode  # type: ignore[return-value]

        return request(
            "POST",
            self._url(SYSTEM_STATEMENTS),
            headers={"Content-Type": TRANSACTION_TYPE},
            body=build_drop(repository_id, bnode.data).encode("utf-8"),
            timeout=self.long_timeout,
        )

    # ── Data transfer ─────────────────────────────────────────

    def import_file(
        self,
        repository_id: str,
        path: Path,
        options: ImportOptions = ImportOptions(),
    ) -> Result[bytes]:
        """Stream an RDF file into the repository."""
        path = Path(path)
        ct = resolve_import_type(path, options)
        if not ct.ok:
            return ct  # type: ignore[return-value]

        try:
            size = path.stat().st_size
            handle = path.open("rb")
        except OSError as exc:
            return Fail(error=f"Cannot read {path}: {exc}", kind=FailKind.IO)

        with handle:
            return request(
                "POST",
                self._url(f"/repositories/{repository_id}/statements"),
                headers={"Content-Type": ct.data, "Content-Length": str(size)},
                body=handle,
                timeout=self.long_timeout,
            )

    def export(self, repository_id: str, options: ExportOptions = ExportOptions()) -> Result[bytes]:
        """All explicit statements of the repository, inference off."""
        accept = resolve_export_type(options)
        if not accept.ok:
            return accept  # type: ignore[return-value]
        return request(
            "GET",
            self._url(f"/repositories/{repository_id}/statements?infer=false"),
            headers={"Accept": accept.data},
            timeout=self.timeout,
        )

    # ── SPARQL ────────────────────────────────────────────────

    def build_query(self, sparql: str) -> str:
        """Query text as sent: rendered prefixes followed by the query."""
        prefix = self.prefixes.render()
        return f"{prefix}\n{sparql}" if prefix else sparql

    def stream(
        self,
        repository_id: str,
        sparql: str,
        options: QueryOptions = QueryOptions(),
    ) -> Result[Iterator[bytes]]:
        """Run a query and return its response as an iterator of chunks.

        "xml" and "json" yield the raw body as it arrives. "tabular" reads
        the whole JSON body and yields the tab-separated table once.
        """
        accept = _RESULT_TYPES.get(options.format)
        if accept is None:
            return Fail(error=f"Unknown result format: {options.format}", kind=FailKind.CONTENT_TYPE)

        query = quote_plus(self.build_query(sparql))
        infer = "true" if options.infer else "false"
        url = self._url(f"/repositories/{repository_id}?query={query}&infer={infer}")

        if options.format == "tabular":
            body = request("GET", url, headers={"Accept": accept}, timeout=self.timeout)
            if not body.ok:
                return body  # type: ignore[return-value]
            parsed = parse_results(body.data)
            if not parsed.ok:
                return parsed  # type: ignore[return-value]
            return Ok(data=iter([render_table(parsed.data).encode("utf-8")]))

        opened = open_request("GET", url, headers={"Accept": accept}, timeout=self.timeout)
        if not opened.ok:
            return opened  # type: ignore[return-value]
        return Ok(data=iter_chunks(opened.data, options.chunk_size))

    def query(
        self,
        repository_id: str,
        sparql: str,
        options: QueryOptions = QueryOptions(),
    ) -> Result[str | bytes]:
        """Drain stream(): tabular text as str, xml/json as raw bytes."""
        streamed = self.stream(repository_id, sparql, options)
        if not streamed.ok:
            return streamed  # type: ignore[return-value]

        try:
            body = b"".join(streamed.data)
        except (OSError, HTTPException) as exc:
            return Fail(error=f"Read error: {exc!r}", kind=FailKind.TRANSPORT)

        if options.format == "tabular":
            return Ok(data=body.decode("utf-8"))
        return Ok(data=body)

    def find_stream(
        self, repository_id: str, keyword: str, options: QueryOptions = QueryOptions()
    ) -> Result[Iterator[bytes]]:
        return self.stream(repository_id, find_query(keyword), options)

    def find(
        self, repository_id: str, keyword: str, options: QueryOptions = QueryOptions()
    ) -> Result[str | bytes]:
        """All statements of subjects having some property equal to keyword."""
        return self.query(repository_id, find_query(keyword), options)

    def head_stream(
        self, repository_id: str, options: HeadOptions = HeadOptions()
    ) -> Result[Iterator[bytes]]:
        return self.stream(repository_id, head_query(options.limit, options.offset), options)

    def head(self, repository_id: str, options: HeadOptions = HeadOptions()) -> Result[str | bytes]:
        """One page of statements; the query offset is options.offset + 61."""
        return self.query(repository_id, head_query(options.limit, options.offset), options)
