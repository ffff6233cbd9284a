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

"""Loads the client YAML configuration and defines typed call options.

Pure loader and option types — no HTTP. The YAML structure IS the
configuration contract; per-call options are frozen dataclasses with
their defaults documented on the fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from owlim.result import Fail, FailKind, Ok, Result

DEFAULT_TIMEOUT = 30
LONG_TIMEOUT = 60 * 60

_DEFAULT_PORTS = {"http": 80, "https": 443}


# ── Endpoint ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Endpoint:
    """Triplestore location, derived once from the configured URL."""

    url: str
    scheme: str
    host: str
    port: int
    path: str

    @classmethod
    def from_url(cls, url: str) -> Endpoint:
        parts = urlsplit(url)
        if parts.scheme not in _DEFAULT_PORTS or not parts.hostname:
            raise ValueError(f"Invalid endpoint URL: {url!r}")
        return cls(
            url=url,
            scheme=parts.scheme,
            host=f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname,
            port=parts.port or _DEFAULT_PORTS[parts.scheme],
            path=parts.path.rstrip("/"),
        )

    def resolve(self, relative: str) -> str:
        """Absolute URL for a path relative to the endpoint base path."""
        return f"{self.scheme}://{self.host}:{self.port}{self.path}{relative}"


# ── Call options ───────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class CreateOptions:
    """Repository metadata; omitted fields are rendered empty."""

    repository_label: str = ""
    default_namespace: str = ""
    base_url: str = ""
    license: str = ""


@dataclass(frozen=True, slots=True)
class ImportOptions:
    """Explicit content_type wins over format, format wins over file suffix."""

    content_type: str | None = None
    format: str | None = None


@dataclass(frozen=True, slots=True)
class ExportOptions:
    format: str | None = None  # None → application/rdf+xml


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """format is "tabular" (default), "json" or "xml"."""

    format: str = "tabular"
    infer: bool = False
    chunk_size: int = 8192


@dataclass(frozen=True, slots=True)
class HeadOptions(QueryOptions):
    limit: int = 20
    offset: int = 1


# ── Client config ──────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint: Endpoint
    timeout: int = DEFAULT_TIMEOUT
    long_timeout: int = LONG_TIMEOUT
    default_prefixes: bool = True
    prefixes: dict[str, str] = field(default_factory=dict)


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a YAML client config. No validation beyond structure."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}", kind=FailKind.CONFIG)

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", kind=FailKind.CONFIG, context=str(path))

    try:
        config = ClientConfig(
            endpoint=Endpoint.from_url(raw["endpoint"]),
            timeout=int(raw.get("timeout", DEFAULT_TIMEOUT)),
            long_timeout=int(raw.get("long_timeout", LONG_TIMEOUT)),
            default_prefixes=bool(raw.get("default_prefixes", True)),
            prefixes={str(k): str(v) for k, v in (raw.get("prefixes") or {}).items()},
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        return Fail(error=f"Config structure error: {exc}", kind=FailKind.CONFIG, context=str(path))

    return Ok(data=config)
