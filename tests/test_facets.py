"""Tests for facet merging and inheritance."""

import pytest

from entity_search.graph import EntityStore, FacetInheritanceEngine, merge_facets
from entity_search.models import Entity


def make_entity(entity_id: str, entity_type: str, facets: dict | None = None, *targets: str) -> Entity:
    return Entity(
        id=entity_id,
        type=entity_type,
        name=entity_id.title(),
        facets=facets or {},
        relationships=[{"type": "appears-in", "target": t} for t in targets],
    )


class TestMergeFacets:
    """Tests for the merge rules."""

    def test_lists_union(self):
        target = {"genre": ["heist"]}
        merge_facets(target, {"genre": ["noir"]})
        assert set(target["genre"]) == {"noir", "heist"}

    def test_lists_deduplicated(self):
        target = {"genre": ["heist", "noir"]}
        merge_facets(target, {"genre": ["noir", "sci-fi", "noir"]})
        assert sorted(target["genre"]) == ["heist", "noir", "sci-fi"]

    def test_repeats_in_incoming_list_collapse(self):
        target = {"genre": ["heist"]}
        merge_facets(target, {"genre": ["noir", "noir"]})
        assert target == {"genre": ["heist", "noir"]}

    def test_list_merge_idempotent(self):
        target = {"genre": ["heist"]}
        merge_facets(target, {"genre": ["noir"]})
        merge_facets(target, {"genre": ["noir"]})
        assert sorted(target["genre"]) == ["heist", "noir"]

    def test_list_merge_commutative(self):
        a = {"genre": ["heist"]}
        b = {"genre": ["noir"]}
        merge_facets(a, {"genre": ["noir"]})
        merge_facets(b, {"genre": ["heist"]})
        assert set(a["genre"]) == set(b["genre"])

    def test_existing_scalar_wins(self):
        target = {"morality": "heroic"}
        merge_facets(target, {"morality": "villainous"})
        assert target == {"morality": "heroic"}

    def test_existing_boolean_wins(self):
        target = {"sequel": False}
        merge_facets(target, {"sequel": True})
        assert target == {"sequel": False}

    def test_mixed_shapes_keep_existing(self):
        target = {"genre": "noir"}
        merge_facets(target, {"genre": ["heist"]})
        assert target == {"genre": "noir"}

    def test_null_values_ignored(self):
        target = {}
        merge_facets(target, {"morality": None, "genre": ["noir"]})
        assert target == {"genre": ["noir"]}

    def test_new_lists_are_copies(self):
        source = {"genre": ["noir"]}
        target = {}
        merge_facets(target, source)

        target["genre"].append("heist")
        assert source == {"genre": ["noir"]}


class TestFacetInheritanceEngine:
    """Tests for type-gated, one-hop inheritance."""

    @pytest.fixture
    def store(self):
        return EntityStore([
            make_entity("inception", "movie", {"genre": ["sci-fi", "heist"], "morality": "grey"}),
            make_entity("memento", "movie", {"genre": ["noir"], "morality": "dark"}, "inception"),
            make_entity("dune", "book", {"genre": ["sci-fi"], "award": True}),
            make_entity("empty", "movie", {}),
            make_entity("cobb", "character", {}, "inception", "memento"),
            make_entity("paul", "character", {"morality": "heroic"}, "dune"),
            make_entity("totem", "item", {}, "inception"),
            make_entity("van", "vehicle", {}, "inception"),
            make_entity("limbo", "location", {}, "inception"),
            make_entity("city", "location", {"climate": "rainy"}),
            make_entity("street", "location", {}, "city"),
            make_entity("arrakis", "location", {}, "paul"),
            make_entity("nobody", "character", {}, "empty", "ghost"),
        ])

    @pytest.fixture
    def engine(self, store):
        return FacetInheritanceEngine(store)

    def test_character_inherits_from_movie(self, engine, store):
        inherited = engine.inherited_facets(store.get("cobb"))
        assert set(inherited["genre"]) == {"sci-fi", "heist", "noir"}

    def test_first_relationship_scalar_sticks(self, engine, store):
        inherited = engine.inherited_facets(store.get("cobb"))
        assert inherited["morality"] == "grey"

    def test_character_inherits_from_book(self, engine, store):
        inherited = engine.inherited_facets(store.get("paul"))
        assert inherited == {"genre": ["sci-fi"], "award": True}

    @pytest.mark.parametrize("entity_id", ["totem", "van", "limbo"])
    def test_other_dependent_types_inherit(self, engine, store, entity_id):
        inherited = engine.inherited_facets(store.get(entity_id))
        assert set(inherited["genre"]) == {"sci-fi", "heist"}

    def test_location_does_not_inherit_from_location(self, engine, store):
        assert engine.inherited_facets(store.get("street")) == {}

    def test_providers_do_not_inherit(self, engine, store):
        assert engine.inherited_facets(store.get("memento")) == {}

    def test_no_second_hop(self, engine, store):
        """arrakis -> paul -> dune: the book is two hops away."""
        assert engine.inherited_facets(store.get("arrakis")) == {}

    def test_empty_provider_and_missing_target(self, engine, store):
        assert engine.providers(store.get("nobody")) == []
        assert engine.inherited_facets(store.get("nobody")) == {}

    def test_own_values_win(self, engine, store):
        merged = engine.merged_facets(store.get("paul"))
        assert merged["morality"] == "heroic"
        assert merged["genre"] == ["sci-fi"]

    def test_merged_for_provider_is_own(self, engine, store):
        merged = engine.merged_facets(store.get("inception"))
        assert merged == {"genre": ["sci-fi", "heist"], "morality": "grey"}

    def test_sources_not_mutated(self, engine, store):
        engine.merged_facets(store.get("cobb"))
        engine.merged_facets(store.get("cobb"))
        assert store.get("inception").facets["genre"] == ["sci-fi", "heist"]
        assert store.get("memento").facets["genre"] == ["noir"]
        assert store.get("cobb").facets == {}

    def test_custom_type_gates(self, store):
        engine = FacetInheritanceEngine(
            store,
            inheriting_types=frozenset({"location"}),
            providing_types=frozenset({"location"}),
        )
        assert engine.inherited_facets(store.get("street")) == {"climate": "rainy"}
        assert engine.inherited_facets(store.get("cobb")) == {}
