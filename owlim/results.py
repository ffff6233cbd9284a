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

"""SPARQL JSON results → tab-separated text.

Column order comes from the document's declared ``head.vars``, never from
row contents, so a row that omits a variable still lines up. Rendering:

    absent binding   → empty cell
    type "uri"       → <value> with every backslash removed
    anything else    → value with escaped slashes (\\/) restored to /
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from owlim.result import Fail, FailKind, Ok, Result

Binding = dict[str, dict[str, str]]

_ABSENT = {"type": "", "value": ""}


@dataclass(frozen=True, slots=True)
class SparqlResults:
    vars: list[str]
    bindings: list[Binding] = field(default_factory=list)


def parse_results(raw: str | bytes) -> Result[SparqlResults]:
    """Parse a SPARQL results JSON document."""
    try:
        doc: dict[str, Any] = json.loads(raw)
        head = list(doc["head"]["vars"])
        body = list(doc["results"]["bindings"])
        _check_shape(head, body)
    except (ValueError, KeyError, TypeError) as exc:
        return Fail(
            error=f"Malformed SPARQL JSON results: {exc}",
            kind=FailKind.MALFORMED,
            context=raw[:200] if isinstance(raw, (str, bytes)) else None,
        )
    return Ok(data=SparqlResults(vars=head, bindings=body))


def _check_shape(head: list[Any], body: list[Any]) -> None:
    """Raise TypeError unless vars are strings and every binding is {type?, value}."""
    if not all(isinstance(var, str) for var in head):
        raise TypeError("head.vars must be strings")
    for index, row in enumerate(body):
        if not isinstance(row, dict):
            raise TypeError(f"row {index} is not an object")
        for var, binding in row.items():
            if not isinstance(binding, dict) or not isinstance(binding.get("value"), str):
                raise TypeError(f"row {index}: binding {var!r} has no string value")
            if not isinstance(binding.get("type", ""), str):
                raise TypeError(f"row {index}: binding {var!r} has a non-string type")


def format_cell(binding: dict[str, str]) -> str:
    value = binding.get("value", "")
    if binding.get("type") == "uri":
        return "<" + value.replace("\\", "") + ">"
    return value.replace("\\/", "/")


def render_table(results: SparqlResults) -> str:
    lines = ["\t".join(results.vars) + "\n"]
    for row in results.bindings:
        cells = [format_cell(row.get(var) or _ABSENT) for var in results.vars]
        lines.append("\t".join(cells) + "\n")
    return "".join(lines)


def tabulate(raw: str | bytes) -> str:
    """Tabular text for a JSON results document, or "" if it cannot be parsed.

    The empty string is ambiguous with "no usable rows"; callers that need to
    tell the two apart should use parse_results() and check for Fail.
    """
    parsed = parse_results(raw)
    if not parsed.ok:
        return ""
    return render_table(parsed.data)


def binding_values(results: SparqlResults, var: str) -> list[str]:
    """Values bound to one variable, in row order; unbound rows are skipped."""
    return [row[var]["value"] for row in results.bindings if var in row]
