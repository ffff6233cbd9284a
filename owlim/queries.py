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

"""Template renderer and canned browse queries.

Replaces {{variable}} placeholders in templates with given values.
Pure string interpolation — no SPARQL knowledge.
"""

from __future__ import annotations

import re

from owlim.logger import get_logger

log = get_logger(__name__)

# Rows skipped before the caller's offset when browsing with head().
HEAD_OFFSET_BIAS = 61

FIND_TEMPLATE = "select ?s ?p ?o where { ?s ?t '{{keyword}}'. ?s ?p ?o . }"
HEAD_TEMPLATE = "select ?s ?p ?o where { ?s ?p ?o . } offset {{offset}} limit {{limit}}"

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, variables: dict[str, str]) -> str:
    """Replace all {{key}} placeholders in template with variable values.

    Single pass: placeholders inside substituted values are left alone.
    """
    return _PLACEHOLDER.sub(lambda m: variables.get(m.group(1), m.group(0)), template)


def _escape_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def find_query(keyword: str) -> str:
    """Every statement of any subject that has some property equal to keyword."""
    return render_template(FIND_TEMPLATE, {"keyword": _escape_literal(keyword)})


def head_query(limit: int, offset: int) -> str:
    query = render_template(
        HEAD_TEMPLATE,
        {"offset": str(int(offset) + HEAD_OFFSET_BIAS), "limit": str(int(limit))},
    )
    log.debug("head query: %s", query)
    return query
