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

"""RDF serialization registry and content-type negotiation.

Maps short format tokens (file suffixes or user-given names) to the MIME
types the store accepts. Unknown tokens resolve to None, never to a guess.
"""

from __future__ import annotations

import re
from pathlib import Path

from owlim.config import ExportOptions, ImportOptions
from owlim.result import Fail, FailKind, Ok, Result

CONTENT_TYPES: dict[str, str] = {
    "ttl": "application/x-turtle",
    "turtle": "application/x-turtle",
    "rdf": "application/rdf+xml",
    "rdfxml": "application/rdf+xml",
    "n3": "text/rdf+n3",
    "nt": "text/plain",
    "trix": "application/trix",
    "trig": "application/x-trig",
    "rdfbin": "application/x-binary-rdf",
}

DEFAULT_EXPORT_TYPE = "application/rdf+xml"

_SUFFIX = re.compile(r"\.(\w+)$")


def content_type(token: str) -> str | None:
    """MIME type for a format token. Case-sensitive: normalize before lookup."""
    return CONTENT_TYPES.get(token)


def resolve_import_type(path: Path, options: ImportOptions) -> Result[str]:
    """Pick the Content-Type for an import: override, then format, then suffix."""
    if options.content_type:
        return Ok(data=options.content_type)

    if options.format:
        ct = content_type(options.format)
        if ct is None:
            return Fail(
                error=f"Content-Type detection failed for {path} (format {options.format!r})",
                kind=FailKind.CONTENT_TYPE,
            )
        return Ok(data=ct)

    match = _SUFFIX.search(path.name)
    if match is None:
        return Fail(
            error=f"Invalid suffix ({path}). Explicitly specify the RDF format.",
            kind=FailKind.CONTENT_TYPE,
        )

    ct = content_type(match.group(1).lower())
    if ct is None:
        return Fail(error=f"Content-Type detection failed for '{path}'", kind=FailKind.CONTENT_TYPE)
    return Ok(data=ct)


def resolve_export_type(options: ExportOptions) -> Result[str]:
    """Accept type for an export; defaults to RDF/XML."""
    if not options.format:
        return Ok(data=DEFAULT_EXPORT_TYPE)
    ct = content_type(options.format)
    if ct is None:
        return Fail(error=f"Invalid format ({options.format})", kind=FailKind.CONTENT_TYPE)
    return Ok(data=ct)
