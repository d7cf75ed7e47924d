# tests/unit/test_builder.py
"""
Tests for AncestryBuilder and the graph it produces.

Relationship fields are compared through ``.paths`` on the list views and
``_path`` attributes on the links, with ``is`` checks where identity
matters.
"""

from __future__ import annotations

import pytest

from ancestry.config.schema import DEFAULT_SORT_FILES_FIRST
from ancestry.core.exceptions import ConfigurationError
from ancestry.tree.builder import AncestryBuilder, link_within
from ancestry.tree.node import ItemSequence


@pytest.fixture
def graph(site_files):
    return AncestryBuilder(files_first=DEFAULT_SORT_FILES_FIRST).build(site_files)


class TestLinkWithin:
    """Tests for link_within()."""

    def test_middle(self):
        assert link_within(["a", "b", "c"], 1) == ("a", "c", "a", "c")

    def test_ends(self):
        assert link_within(["a", "b"], 0) == ("a", "b", None, "b")
        assert link_within(["a", "b"], 1) == ("a", "b", "a", None)

    def test_single(self):
        assert link_within(["a"], 0) == ("a", "a", None, None)


class TestSiteHierarchy:
    """Relationships for the default site fixture."""

    def test_every_item_has_a_node(self, graph, site_files):
        assert len(graph) == len(site_files)
        for path in site_files:
            assert graph.node(path).path == path

    def test_basename(self, graph):
        assert graph.node("index.html").basename == "index.html"
        assert graph.node("test/index.md").basename == "index.md"

    def test_item_points_back(self, graph, site_files):
        assert graph.node("index.html").item is site_files["index.html"]
        assert graph.node("test/thing.htm").item is site_files["test/thing.htm"]

    def test_members(self, graph):
        assert graph.node("index.html").members.paths == ["index.html"]
        assert graph.node("test/image.gif").members.paths == [
            "test/index.md",
            "test/image.gif",
            "test/page.html",
            "test/thing.htm",
        ]

    def test_member_links(self, graph, site_files):
        gif = graph.node("test/image.gif")

        assert gif.first_member is site_files["test/index.md"]
        assert gif.last_member is site_files["test/thing.htm"]
        assert gif.prev_member_path == "test/index.md"
        assert gif.next_member_path == "test/page.html"

        assert graph.node("index.html").next_member is None
        assert graph.node("index.html").prev_member is None
        assert graph.node("test/index.md").prev_member is None
        assert graph.node("test/page.html").next_member_path == "test/thing.htm"
        assert graph.node("test/thing.htm").next_member is None

    def test_member_index(self, graph):
        assert graph.node("index.html").member_index == 0
        assert graph.node("test/image.gif").member_index == 1

    def test_children(self, graph):
        assert graph.node("index.html").children.paths == ["test/index.md"]
        assert graph.node("test/index.md").children.paths == [
            "test/folder/index.jade",
            "test/folder2/index.htm",
        ]
        assert graph.node("test/folder/index.jade").children is None
        assert graph.node("test/folder2/index.htm").children is None

    def test_child_links(self, graph):
        assert graph.node("index.html").first_child_path == "test/index.md"
        assert graph.node("index.html").last_child_path == "test/index.md"
        assert graph.node("test/image.gif").first_child_path == "test/folder/index.jade"
        assert graph.node("test/image.gif").last_child_path == "test/folder2/index.htm"
        assert graph.node("test/folder/index.jade").first_child is None
        assert graph.node("test/folder/index.jade").last_child is None

    def test_parent(self, graph, site_files):
        assert graph.node("index.html").parent is None
        assert graph.node("test/index.md").parent is site_files["index.html"]
        assert graph.node("test/image.gif").parent is site_files["index.html"]
        assert graph.node("test/folder2/big.html").parent_path == "test/index.md"

    def test_root(self, graph, site_files):
        for path in ["index.html", "test/thing.htm", "test/folder2/index.htm"]:
            assert graph.node(path).root is site_files["index.html"]

    def test_siblings(self, graph):
        assert graph.node("test/image.gif").siblings.paths == ["test/index.md"]
        assert graph.node("test/folder/index.jade").siblings.paths == [
            "test/folder/index.jade",
            "test/folder2/index.htm",
        ]

    def test_sibling_links(self, graph):
        assert graph.node("test/folder2/big.html").first_sibling_path == "test/folder/index.jade"
        assert graph.node("test/index.md").first_sibling_path == "test/index.md"
        assert graph.node("test/folder/index.jade").last_sibling_path == "test/folder2/index.htm"
        assert graph.node("test/index.md").last_sibling_path == "test/index.md"
        assert graph.node("test/folder/index.jade").next_sibling_path == "test/folder2/index.htm"
        assert graph.node("test/index.md").next_sibling is None
        assert graph.node("test/folder2/index.htm").prev_sibling_path == "test/folder/index.jade"
        assert graph.node("test/index.md").prev_sibling is None

    def test_sibling_index(self, graph):
        assert graph.node("index.html").sibling_index == 0
        assert graph.node("test/folder/index.jade").sibling_index == 0
        assert graph.node("test/folder2/big.html").sibling_index == 1

    def test_parentless_item_is_its_own_sibling(self, graph, site_files):
        node = graph.node("index.html")

        assert node.siblings.paths == ["index.html"]
        assert node.first_sibling is site_files["index.html"]
        assert node.last_sibling is site_files["index.html"]


class TestInvariants:
    """Properties that hold for every node."""

    def test_member_index_points_at_self(self, graph):
        for _, node in graph.nodes():
            assert node.members[node.member_index] is node.item

    def test_siblings_alias_parent_children(self, graph):
        for _, node in graph.nodes():
            if node.parent_path is not None:
                assert node.siblings is graph.node(node.parent_path).children

    def test_parent_chain_ends_at_root(self, graph):
        for _, node in graph.nodes():
            current = node
            while current.parent_path is not None:
                current = graph.node(current.parent_path)
            assert current.path == node.root_path

    def test_bucket_shares_one_members_list(self, graph):
        a = graph.node("test/index.md")
        b = graph.node("test/thing.htm")

        assert a.member_paths is b.member_paths
        assert a.members is b.members

    def test_views_are_read_only(self, graph):
        members = graph.node("test/index.md").members

        assert isinstance(members, ItemSequence)
        assert not hasattr(members, "append")
        with pytest.raises(TypeError):
            members[0] = {}  # type: ignore[index]

    def test_paths_returns_a_copy(self, graph):
        members = graph.node("test/index.md").members
        members.paths.clear()

        assert len(members) == 4

    def test_member_index_in_a_large_bucket(self):
        files = {f"page{n:03d}.md": {} for n in range(200)}
        files.update({f"dir{n}/index.md": {} for n in range(5)})

        graph = AncestryBuilder().build(files)

        for position, path in enumerate(graph.node("page000.md").member_paths):
            node = graph.node(path)
            assert node.member_index == position
            assert node.members[position] is files[path]

    def test_bucket_shares_its_sibling_index(self):
        files = {
            "index.md": {},
            "a/index.md": {},
            "b/index.md": {},
            "b/one.md": {},
            "b/two.md": {},
        }

        graph = AncestryBuilder().build(files)

        for path in ("b/index.md", "b/one.md", "b/two.md"):
            node = graph.node(path)
            assert node.sibling_index == 1
            assert node.siblings[node.sibling_index] is files["b/index.md"]
            assert node.prev_sibling is files["a/index.md"]


class TestOrdering:
    """Ordering options on small flat inputs."""

    def test_reverse(self):
        files = {"a": {}, "b": {}}

        graph = AncestryBuilder(reverse=True).build(files)
        a = graph.node("a")

        assert a.members.paths == ["b", "a"]
        assert a.first_member is files["b"]
        assert a.last_member is files["a"]
        assert a.next_member is None
        assert a.prev_member is files["b"]

    def test_sort_by_property(self):
        files = {"a": {"order": 1}, "b": {"order": 3}, "c": {"order": 2}}

        graph = AncestryBuilder(sort_by="order").build(files)

        assert graph.node("a").members.paths == ["a", "c", "b"]

    def test_sort_by_function(self):
        files = {"a": {"order": 1}, "b": {"order": 3}, "c": {"order": 2}}

        graph = AncestryBuilder(sort_by=lambda a, b: a["order"] - b["order"]).build(files)

        assert graph.node("a").members.paths == ["a", "c", "b"]

    def test_sort_by_multiple_properties(self):
        files = {
            "a": {"first": 1, "second": 3, "third": 1},
            "b": {"first": 1, "second": 3, "third": 2},
            "c": {"first": 1, "second": 2, "third": 1},
        }

        graph = AncestryBuilder(sort_by=["first", "second", "third"]).build(files)

        assert graph.node("a").members.paths == ["c", "a", "b"]

    def test_ties_fall_back_to_path_order(self):
        files = {"c": {"order": 1}, "a": {"order": 1}, "b": {"order": 1}}

        graph = AncestryBuilder(sort_by="order").build(files)

        assert graph.node("a").members.paths == ["a", "b", "c"]

    def test_children_use_the_same_ordering(self):
        files = {"index.md": {}, "x/a.md": {"order": 2}, "y/a.md": {"order": 1}}

        graph = AncestryBuilder(sort_by="order").build(files)

        assert graph.node("index.md").children.paths == ["y/a.md", "x/a.md"]


class TestStructuralEdgeCases:
    """Inputs with missing directory levels."""

    def test_deep_single_item_has_no_parent(self):
        path = "a/file/somewhere/not/at/the/root"

        graph = AncestryBuilder().build({path: {}})
        node = graph.node(path)

        assert node.parent is None
        assert node.root_path == path
        assert node.siblings.paths == [path]

    def test_parent_lookup_is_single_level(self):
        files = {"index.md": {}, "a/b/c.md": {}}

        graph = AncestryBuilder().build(files)

        assert graph.node("a/b/c.md").parent is None
        assert graph.node("index.md").children is None
        assert [n.path for n in graph.roots()] == ["index.md", "a/b/c.md"]

    def test_empty_input(self):
        graph = AncestryBuilder().build({})

        assert len(graph) == 0
        assert graph.roots() == []

    def test_input_is_not_mutated(self, site_files):
        AncestryBuilder().build(site_files)

        assert all(item == {} for item in site_files.values())


class TestConfigurationErrors:
    """Bad matcher shapes fail before any work is done."""

    def test_bad_files_first_raises_at_construction(self):
        with pytest.raises(ConfigurationError):
            AncestryBuilder(files_first=7)

    def test_builder_is_reusable(self):
        builder = AncestryBuilder(sort_by="order")

        first = builder.build({"a": {"order": 2}, "b": {"order": 1}})
        second = builder.build({"x": {"order": 1}, "y": {"order": 2}})

        assert first.node("a").members.paths == ["b", "a"]
        assert second.node("x").members.paths == ["x", "y"]
        assert first is not second

    def test_item_paths_need_a_running_build(self):
        with pytest.raises(RuntimeError, match="build"):
            AncestryBuilder()._path_of({})
