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

"""SPARQL namespace prefixes prepended to every query."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

_DEFAULTS: dict[str, str] = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "owl": "http://www.w3.org/2002/07/owl#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "pext": "http://proton.semanticweb.org/protonext#",
    "psys": "http://proton.semanticweb.org/protonsys#",
    "xhtml": "http://www.w3.org/1999/xhtml#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "skos": "http://www.w3.org/2004/02/skos/core#",
    "void": "http://rdfs.org/ns/void#",
    "dbpedia": "http://dbpedia.org/resource/",
    "dbp": "http://dbpedia.org/property/",
    "dbo": "http://dbpedia.org/ontology/",
    "yago": "http://dbpedia.org/class/yago/",
    "fb": "http://rdf.freebase.com/ns/",
    "sioc": "http://rdfs.org/sioc/ns#",
    "geo": "http://www.w3.org/2003/01/geo/wgs84_pos#",
    "geonames": "http://www.geonames.org/ontology#",
    "bibo": "http://purl.org/ontology/bibo/",
    "prism": "http://prismstandard.org/namespaces/basic/2.1/",
}


def default_prefixes() -> dict[str, str]:
    """Fresh copy of the built-in prefix set."""
    return dict(_DEFAULTS)


class PrefixTable:
    """Mutable prefix → IRI mapping. Not safe for concurrent mutation."""

    def __init__(self, prefixes: Mapping[str, str] | None = None) -> None:
        self._prefixes: dict[str, str] = dict(prefixes or {})

    def load_defaults(self) -> None:
        """Replace the whole table with the built-in set."""
        self._prefixes = default_prefixes()

    def update(self, prefixes: Mapping[str, str]) -> None:
        self._prefixes.update(prefixes)

    def render(self) -> str:
        """PREFIX declarations sorted by name, newline-joined."""
        return "\n".join(
            f"PREFIX {name}: <{iri}>" for name, iri in sorted(self._prefixes.items())
        )

    def __getitem__(self, name: str) -> str:
        return self._prefixes[name]

    def __setitem__(self, name: str, iri: str) -> None:
        self._prefixes[name] = iri

    def __delitem__(self, name: str) -> None:
        del self._prefixes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._prefixes

    def __iter__(self) -> Iterator[str]:
        return iter(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)
