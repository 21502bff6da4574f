"""
Tests for the type graph builder.
"""

from __future__ import annotations

import logging

import pytest

from models_builder.pipeline import (
    BuilderConfig,
    CyclicInheritanceError,
    DanglingReferenceError,
    InconsistentBatchError,
    ItemCategory,
    RawComposition,
    RawContentType,
    RawPropertyType,
    TypeGraphBuilder,
    UnresolvedPropertyTypeError,
    build_type_graph,
)


def raw(type_id, alias, parent_id=-1, compositions=(), properties=(), category=ItemCategory.CONTENT):
    """Build a raw type the way the platform reports it."""
    return RawContentType(
        id=type_id,
        alias=alias,
        category=category,
        parent_id=parent_id,
        properties=[RawPropertyType(alias=a) for a in properties],
        compositions=[RawComposition(id=c) for c in compositions],
    )


def string_resolver(category, type_alias, property_alias):
    return "System.String"


def by_alias(type_models):
    return {t.alias: t for t in type_models}


class TestScenarios:
    """The reference base / mix / leaf batches"""

    def test_mixin_without_parent(self):
        batch = [
            raw(1, "base"),
            raw(2, "mix"),
            raw(3, "leaf", parent_id=1, compositions=[2]),
        ]
        types = build_type_graph("content", batch, string_resolver)
        nodes = by_alias(types)

        assert len(types) == 3
        assert nodes["leaf"].base_type is nodes["base"]
        assert nodes["leaf"].base_type.id == 1
        assert nodes["leaf"].mixin_types == [nodes["mix"]]
        assert nodes["mix"].is_mixin is True
        assert nodes["base"].is_mixin is False
        assert nodes["leaf"].is_mixin is False

    def test_mixin_marks_its_parent(self):
        batch = [
            raw(1, "base"),
            raw(2, "mix", parent_id=1),
            raw(3, "leaf", parent_id=1, compositions=[2]),
        ]
        nodes = by_alias(build_type_graph("content", batch, string_resolver))

        assert nodes["mix"].is_mixin is True
        assert nodes["base"].is_mixin is True
        assert nodes["leaf"].is_mixin is False

    def test_parent_composition_is_not_a_mixin(self):
        batch = [
            raw(1, "base"),
            raw(2, "leaf", parent_id=1, compositions=[1]),
        ]
        nodes = by_alias(build_type_graph("content", batch, string_resolver))

        assert nodes["leaf"].mixin_types == []
        assert nodes["base"].is_mixin is False

    def test_marking_walks_the_whole_chain(self):
        batch = [
            raw(1, "root"),
            raw(2, "middle", parent_id=1),
            raw(3, "mix", parent_id=2),
            raw(4, "user", compositions=[3]),
        ]
        nodes = by_alias(build_type_graph("content", batch, string_resolver))

        assert [t.alias for t in nodes["mix"].ancestors()] == ["middle", "root"]
        assert all(t.is_mixin for t in [nodes["mix"], nodes["middle"], nodes["root"]])
        assert nodes["user"].is_mixin is False

    def test_children_declared_before_parents(self):
        batch = [
            raw(3, "leaf", parent_id=1, compositions=[1, 2]),
            raw(2, "mix"),
            raw(1, "base"),
        ]
        types = build_type_graph("content", batch, string_resolver)

        assert [t.id for t in types] == [3, 2, 1]
        assert types[0].base_type is types[2]
        assert types[0].mixin_types == [types[1]]

    def test_mixins_keep_declaration_order(self):
        batch = [
            raw(1, "a"),
            raw(2, "b"),
            raw(3, "c"),
            raw(4, "page", compositions=[3, 1, 2]),
        ]
        types = build_type_graph("content", batch, string_resolver)

        assert [m.alias for m in types[3].mixin_types] == ["c", "a", "b"]

    def test_empty_batch(self):
        assert build_type_graph("media", [], string_resolver) == []

    def test_zero_parent_means_no_parent(self):
        batch = [
            raw(1, "mix", parent_id=0),
            raw(2, "page", parent_id=0, compositions=[1]),
        ]
        nodes = by_alias(build_type_graph("content", batch, string_resolver))

        assert nodes["page"].base_type is None
        assert nodes["page"].has_base_type is False
        assert nodes["page"].mixin_types == [nodes["mix"]]
        assert nodes["mix"].is_mixin is True
        assert nodes["mix"].base_type is None
        assert nodes["page"].to_dict()["base_type_id"] is None


class TestProperties:
    """Test cases for property construction"""

    def test_properties_are_named_and_resolved(self):
        table = {
            ("page", "bodyText"): "System.Web.IHtmlString",
            ("page", "publish_date"): "System.DateTime",
        }
        calls = []

        def resolver(category, type_alias, property_alias):
            calls.append((category, type_alias, property_alias))
            return table[(type_alias, property_alias)]

        types = build_type_graph("content", [raw(1, "page", properties=["bodyText", "publish_date"])], resolver)
        properties = types[0].properties

        assert [(p.alias, p.name, p.clr_type) for p in properties] == [
            ("bodyText", "BodyText", "System.Web.IHtmlString"),
            ("publish_date", "PublishDate", "System.DateTime"),
        ]
        assert calls == [
            (ItemCategory.CONTENT, "page", "bodyText"),
            (ItemCategory.CONTENT, "page", "publish_date"),
        ]

    def test_clr_type_is_passed_through_verbatim(self):
        marker = object()
        types = build_type_graph("content", [raw(1, "page", properties=["x"])], lambda *args: marker)
        assert types[0].properties[0].clr_type is marker

    def test_only_declared_properties(self):
        batch = [
            raw(1, "base", properties=["title"]),
            raw(2, "leaf", parent_id=1, properties=["body"]),
        ]
        nodes = by_alias(build_type_graph("content", batch, string_resolver))
        assert [p.alias for p in nodes["leaf"].properties] == ["body"]

    def test_ignored_properties_are_skipped(self):
        config = BuilderConfig(ignore_properties=["umbracoNaviHide"])
        types = build_type_graph(
            "content",
            [raw(1, "page", properties=["title", "umbracoNaviHide"])],
            string_resolver,
            config,
        )
        assert [p.alias for p in types[0].properties] == ["title"]

    def test_type_and_property_names_use_the_same_cleaning(self):
        types = build_type_graph("content", [raw(1, "news_item", properties=["news_item"])], string_resolver)
        assert types[0].name == types[0].properties[0].name == "NewsItem"


class TestInvariants:
    """Graph-wide invariants over a larger batch"""

    @pytest.fixture
    def types(self):
        batch = [
            raw(1, "site"),
            raw(2, "page", parent_id=1, compositions=[1, 5]),
            raw(3, "article", parent_id=2, compositions=[2, 6, 5]),
            raw(4, "gallery", parent_id=2, compositions=[2, 6]),
            raw(5, "seo", parent_id=7),
            raw(6, "tags"),
            raw(7, "compositionRoot"),
        ]
        return build_type_graph("content", batch, string_resolver)

    def test_ids_are_unique(self, types):
        ids = [t.id for t in types]
        assert len(ids) == len(set(ids))

    def test_base_types_resolve(self, types):
        for type_model in types:
            if type_model.base_type_id > 0:
                assert type_model.base_type.id == type_model.base_type_id
            else:
                assert type_model.base_type is None

    def test_mixins_never_include_the_parent(self, types):
        for type_model in types:
            assert all(m.id != type_model.base_type_id for m in type_model.mixin_types)

    def test_mixin_marking_reaches_ancestors(self, types):
        for type_model in types:
            if type_model.is_mixin:
                assert all(ancestor.is_mixin for ancestor in type_model.ancestors())

    def test_one_node_per_id(self, types):
        nodes = {t.id: t for t in types}
        for type_model in types:
            if type_model.base_type is not None:
                assert type_model.base_type is nodes[type_model.base_type.id]
            for mixin in type_model.mixin_types:
                assert mixin is nodes[mixin.id]

    def test_expected_mixins(self, types):
        nodes = by_alias(types)
        assert {t.alias for t in types if t.is_mixin} == {"seo", "tags", "compositionRoot"}
        assert [m.alias for m in nodes["article"].mixin_types] == ["tags", "seo"]


class TestErrors:
    """Test cases for failing builds"""

    def test_missing_composition(self):
        batch = [raw(1, "a", compositions=[2])]
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_type_graph("content", batch, string_resolver)

        error = exc_info.value
        assert (error.type_id, error.alias, error.reference_id, error.relation) == (1, "a", 2, "composition")

    def test_missing_parent(self):
        batch = [raw(1, "page", parent_id=1032)]
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_type_graph("content", batch, string_resolver)
        assert exc_info.value.relation == "parent"
        assert "1032" in str(exc_info.value)

    def test_unknown_category(self):
        with pytest.raises(InconsistentBatchError):
            build_type_graph("member", [raw(1, "a")], string_resolver)

    def test_mixed_categories(self):
        batch = [raw(1, "page"), raw(2, "Image", category=ItemCategory.MEDIA)]
        with pytest.raises(InconsistentBatchError, match="Image"):
            build_type_graph("content", batch, string_resolver)

    def test_duplicate_ids(self):
        with pytest.raises(InconsistentBatchError, match="share the id 1"):
            build_type_graph("content", [raw(1, "a"), raw(1, "b")], string_resolver)

    def test_alias_without_name(self):
        with pytest.raises(InconsistentBatchError):
            build_type_graph("content", [raw(1, "123")], string_resolver)

    def test_resolver_lookup_error_is_wrapped(self):
        def resolver(category, type_alias, property_alias):
            return {}[property_alias]

        with pytest.raises(UnresolvedPropertyTypeError) as exc_info:
            build_type_graph("media", [raw(1, "File", properties=["umbracoFile"], category="media")], resolver)

        error = exc_info.value
        assert (error.category, error.type_alias, error.property_alias) == (ItemCategory.MEDIA, "File", "umbracoFile")
        assert isinstance(error.__cause__, KeyError)

    def test_resolver_returning_none(self):
        with pytest.raises(UnresolvedPropertyTypeError):
            build_type_graph("content", [raw(1, "page", properties=["x"])], lambda *args: None)

    def test_cycle_is_detected(self):
        batch = [raw(1, "a", parent_id=2), raw(2, "b", parent_id=1)]
        with pytest.raises(CyclicInheritanceError) as exc_info:
            build_type_graph("content", batch, string_resolver)
        assert exc_info.value.cycle == [1, 2, 1]

    def test_self_parent_is_a_cycle(self):
        with pytest.raises(CyclicInheritanceError):
            build_type_graph("content", [raw(1, "a", parent_id=1)], string_resolver)

    def test_cyclic_marking_terminates_without_detection(self):
        batch = [
            raw(1, "a", parent_id=2),
            raw(2, "b", parent_id=1),
            raw(3, "c", compositions=[1]),
        ]
        types = build_type_graph("content", batch, string_resolver, BuilderConfig(detect_cycles=False))
        assert [t.is_mixin for t in types] == [True, True, False]


class TestBuilder:
    """Test cases for the builder object itself"""

    def test_builder_is_reusable(self):
        builder = TypeGraphBuilder()
        first = builder.build("content", [raw(1, "a"), raw(2, "b", compositions=[1])], string_resolver)
        second = builder.build("content", [raw(1, "a"), raw(2, "b", compositions=[1])], string_resolver)

        assert first[0] is not second[0]
        assert first[0].is_mixin and second[0].is_mixin

    def test_name_collisions_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            types = build_type_graph("content", [raw(1, "news_item"), raw(2, "newsItem")], string_resolver)

        assert [t.name for t in types] == ["NewsItem", "NewsItem"]
        assert "NewsItem" in caplog.text

    def test_property_name_collisions_are_logged(self, caplog):
        builder = TypeGraphBuilder()
        with caplog.at_level(logging.WARNING):
            types = builder.build("content", [raw(1, "page", properties=["news_item", "newsItem", "title"])], string_resolver)

        assert [p.name for p in types[0].properties] == ["NewsItem", "NewsItem", "Title"]
        assert builder.name_resolver.property_collisions("page") == {"NewsItem": ["news_item", "newsItem"]}
        assert "Property aliases of 'page'" in caplog.text

    def test_same_property_on_different_types_is_not_a_collision(self, caplog):
        builder = TypeGraphBuilder()
        with caplog.at_level(logging.WARNING):
            builder.build("content", [raw(1, "a", properties=["title"]), raw(2, "b", properties=["title"])], string_resolver)

        assert builder.name_resolver.property_collisions("a") == {}
        assert caplog.text == ""

    def test_to_dict_renders_links_as_ids(self):
        batch = [raw(1, "base"), raw(2, "mix"), raw(3, "leaf", parent_id=1, compositions=[1, 2], properties=["title"])]
        leaf = build_type_graph("content", batch, string_resolver)[2]

        assert leaf.to_dict() == {
            "id": 3,
            "alias": "leaf",
            "name": "Leaf",
            "item_category": "content",
            "base_type_id": 1,
            "is_mixin": False,
            "mixin_type_ids": [2],
            "properties": [{"alias": "title", "name": "Title", "clr_type": "System.String"}],
        }
