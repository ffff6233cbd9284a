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

"""Repository create/drop transactions against the SYSTEM repository.

Repository configurations live as statements in the SYSTEM repository.
Creating one posts an add-transaction rendered from
templates/create_repository.xml; dropping one first looks up the blank
node holding the configuration (TriX response), then posts a remove
transaction rendered from templates/drop_repository.xml.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote_plus
from xml.sax.saxutils import escape

from lxml import etree

from owlim.config import CreateOptions
from owlim.logger import get_logger
from owlim.queries import render_template
from owlim.result import Fail, FailKind, Ok, Result

log = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

REPOSITORY_ID = "http://www.openrdf.org/config/repository#repositoryID"
TRANSACTION_TYPE = "application/x-rdftransaction"
TRIX_TYPE = "application/trix"


@dataclass(frozen=True, slots=True)
class CreateParams:
    """Everything the create template needs; uuids tag the four bnodes."""

    repository_id: str
    repository_label: str
    default_namespace: str
    base_url: str
    license: str
    uuids: tuple[str, str, str, str]

    def variables(self) -> dict[str, str]:
        context_id, repository_node, impl_node, sail_node = self.uuids
        values = {
            "context_id": context_id,
            "repository_node": repository_node,
            "impl_node": impl_node,
            "sail_node": sail_node,
            "repository_id": self.repository_id,
            "repository_label": self.repository_label,
            "default_namespace": self.default_namespace,
            "base_url": self.base_url,
            "license": self.license,
        }
        return {key: escape(value) for key, value in values.items()}


def new_create_params(repository_id: str, options: CreateOptions) -> CreateParams:
    """Bind options to four freshly generated identifiers."""
    return CreateParams(
        repository_id=repository_id,
        repository_label=options.repository_label,
        default_namespace=options.default_namespace,
        base_url=options.base_url,
        license=options.license,
        uuids=(
            str(uuid.uuid4()),
            str(uuid.uuid4()),
            str(uuid.uuid4()),
            str(uuid.uuid4()),
        ),
    )


def _template(name: str) -> str:
    return (TEMPLATE_DIR / name).read_text(encoding="utf-8")


def build_create(params: CreateParams) -> str:
    document = render_template(_template("create_repository.xml"), params.variables())
    log.info("Rendered create transaction for '%s'", params.repository_id)
    return document


def build_drop(repository_id: str, bnode_id: str) -> str:
    variables = {
        "subject": escape(f"_:{bnode_id}"),
        "repository_id": escape(repository_id),
    }
    return render_template(_template("drop_repository.xml"), variables)


def bnode_lookup_query(repository_id: str) -> str:
    """Statement pattern selecting the SYSTEM statement that names repository_id."""
    pred = quote_plus(f"<{REPOSITORY_ID}>")
    obj = quote_plus(f'"{repository_id}"')
    return f"pred={pred}&obj={obj}&infer=true"


def extract_bnode(trix: bytes) -> Result[str]:
    """Text of the first graph/id element of a TriX document."""
    try:
        root = etree.fromstring(trix)  # noqa: S320
    except etree.XMLSyntaxError as exc:
        return Fail(error=f"Unparsable TriX response: {exc}", kind=FailKind.MALFORMED)

    node = root.find("{*}graph/{*}id")
    if node is None or not (node.text or "").strip():
        return Fail(error="No graph/id element in TriX response", kind=FailKind.NOT_FOUND)
    return Ok(data=node.text.strip())
