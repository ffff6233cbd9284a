"""Tests for the prefix table."""

from owlim.prefixes import PrefixTable, default_prefixes


class TestDefaultPrefixes:
    def test_well_known_vocabularies(self):
        prefixes = default_prefixes()
        assert len(prefixes) >= 20
        assert prefixes["rdf"] == "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
        assert prefixes["foaf"] == "http://xmlns.com/foaf/0.1/"
        assert "skos" in prefixes and "dc" in prefixes and "xsd" in prefixes

    def test_returns_fresh_copy(self):
        first = default_prefixes()
        first["rdf"] = "urn:changed"
        assert default_prefixes()["rdf"] != "urn:changed"


class TestPrefixTable:
    def test_render_sorted_regardless_of_insertion_order(self):
        table = PrefixTable()
        table["zz"] = "http://z/"
        table["aa"] = "http://a/"
        table["mm"] = "http://m/"
        assert table.render() == (
            "PREFIX aa: <http://a/>\nPREFIX mm: <http://m/>\nPREFIX zz: <http://z/>"
        )

    def test_render_defaults_sorted(self):
        table = PrefixTable()
        table.load_defaults()
        names = [line.split()[1].rstrip(":") for line in table.render().split("\n")]
        assert names == sorted(names)
        assert not table.render().endswith("\n")

    def test_render_empty(self):
        assert PrefixTable().render() == ""

    def test_load_defaults_replaces(self):
        table = PrefixTable({"custom": "http://custom/"})
        table.load_defaults()
        assert "custom" not in table
        assert len(table) == len(default_prefixes())

    def test_load_defaults_idempotent(self):
        table = PrefixTable()
        table.load_defaults()
        first = table.render()
        table.load_defaults()
        assert table.render() == first

    def test_mutation(self):
        table = PrefixTable()
        table["ex"] = "not even an iri"
        assert table["ex"] == "not even an iri"
        del table["ex"]
        assert "ex" not in table
        table.update({"a": "http://a/", "b": "http://b/"})
        assert sorted(table) == ["a", "b"]
