"""Tests for create/drop transaction rendering and TriX bnode extraction."""

import uuid
from urllib.parse import parse_qs

from lxml import etree

from owlim.config import CreateOptions
from owlim.result import FailKind
from owlim.transactions import (
    REPOSITORY_ID,
    CreateParams,
    bnode_lookup_query,
    build_create,
    build_drop,
    extract_bnode,
    new_create_params,
)

TRIX = b"""<?xml version="1.0" encoding="UTF-8"?>
<TriX xmlns="http://www.w3.org/2004/03/trix/trix-1/">
  <graph>
    <id>node17f3a</id>
    <triple>
      <id>node17f3b</id>
      <uri>http://www.openrdf.org/config/repository#repositoryID</uri>
      <plainLiteral>books</plainLiteral>
    </triple>
  </graph>
</TriX>
"""


def _params(**overrides):
    values = dict(
        repository_id="books",
        repository_label="",
        default_namespace="",
        base_url="",
        license="",
        uuids=("ctx-1", "repo-2", "impl-3", "sail-4"),
    )
    values.update(overrides)
    return CreateParams(**values)


class TestNewCreateParams:
    def test_four_distinct_uuids(self):
        params = new_create_params("books", CreateOptions())
        assert len(set(params.uuids)) == 4
        for value in params.uuids:
            uuid.UUID(value)

    def test_fresh_per_call(self):
        a = new_create_params("books", CreateOptions())
        b = new_create_params("books", CreateOptions())
        assert set(a.uuids).isdisjoint(b.uuids)

    def test_options_copied(self):
        params = new_create_params("books", CreateOptions(repository_label="Books", license="cc0"))
        assert params.repository_label == "Books"
        assert params.license == "cc0"
        assert params.base_url == ""


class TestBuildCreate:
    def test_well_formed_transaction(self):
        root = etree.fromstring(build_create(_params()).encode("utf-8"))
        assert root.tag == "transaction"
        assert len(root.findall("add")) > 4

    def test_embeds_identifiers(self):
        doc = build_create(_params(repository_label="Book catalogue", base_url="http://ex/"))
        for tag in ("ctx-1", "repo-2", "impl-3", "sail-4"):
            assert tag in doc
        assert "<literal>books</literal>" in doc
        assert "<literal>Book catalogue</literal>" in doc
        assert "<literal>http://ex/</literal>" in doc
        assert "{{" not in doc

    def test_repository_id_statement(self):
        root = etree.fromstring(build_create(_params()).encode("utf-8"))
        ids = [add for add in root.findall("add") if add.findtext("uri") == REPOSITORY_ID]
        assert len(ids) == 1
        assert ids[0].findtext("bnode") == "repo-2"
        assert ids[0].findtext("literal") == "books"

    def test_omitted_options_render_empty(self):
        root = etree.fromstring(build_create(_params()).encode("utf-8"))
        label = [
            add for add in root.findall("add")
            if add.findtext("uri") == "http://www.w3.org/2000/01/rdf-schema#label"
        ]
        assert label[0].findtext("literal") == ""

    def test_values_escaped(self):
        doc = build_create(_params(repository_label="R&D <test>"))
        root = etree.fromstring(doc.encode("utf-8"))
        assert "R&D <test>" in [el.text for el in root.iter("literal")]


class TestBuildDrop:
    def test_single_remove(self):
        root = etree.fromstring(build_drop("books", "node17f3a").encode("utf-8"))
        removes = root.findall("remove")
        assert len(removes) == 1
        assert root.find("add") is None
        remove = removes[0]
        assert remove.findtext("bnode") == "_:node17f3a"
        assert remove.findtext("uri") == REPOSITORY_ID
        assert remove.findtext("literal") == "books"


class TestBnodeLookup:
    def test_query(self):
        params = {k: v[0] for k, v in parse_qs(bnode_lookup_query("books")).items()}
        assert params == {"pred": f"<{REPOSITORY_ID}>", "obj": '"books"', "infer": "true"}

    def test_extract(self):
        result = extract_bnode(TRIX)
        assert result.ok
        assert result.data == "node17f3a"

    def test_extract_without_namespace(self):
        assert extract_bnode(b"<TriX><graph><id>n1</id></graph></TriX>").data == "n1"

    def test_no_graph(self):
        result = extract_bnode(b'<TriX xmlns="http://www.w3.org/2004/03/trix/trix-1/"/>')
        assert not result.ok
        assert result.kind is FailKind.NOT_FOUND

    def test_unparsable(self):
        result = extract_bnode(b"")
        assert not result.ok
        assert result.kind is FailKind.MALFORMED


class TestTemplateValues:
    def test_placeholder_in_value_not_expanded(self):
        doc = build_create(_params(repository_label="Label {{license}}", license="CC0"))
        assert "<literal>Label {{license}}</literal>" in doc
        assert "<literal>CC0</literal>" in doc
