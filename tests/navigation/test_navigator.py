"""
Tests for ancestor traversal.

Focus Areas:
1. Bottom-up ordering and self inclusion
2. Level, content type and model class filters
3. Fail-fast arguments and corrupt parent chains
"""

import logging

import pytest

from contenttree import ContentType, InMemoryContentStore, TreeNavigator
from contenttree.config import NavigationSettings
from contenttree.exceptions import InvalidArgumentError, TreeIntegrityError


def ids(nodes) -> list[int]:
    return [node.id for node in nodes]


class TestAncestors:
    """Test the ancestor sequences."""

    def test_ancestors_are_bottom_up(self, navigator, tree):
        """Ancestors come closest first."""
        assert ids(navigator.ancestors(tree["comment"])) == [1110, 1100, 1000]

    def test_ancestors_never_include_self(self, navigator, tree):
        """The starting node is not its own ancestor."""
        assert tree["post"].id not in ids(navigator.ancestors(tree["post"]))

    def test_top_level_node_has_no_ancestors(self, navigator, tree):
        """A node directly under the root has no ancestors."""
        assert list(navigator.ancestors(tree["home"])) == []

    def test_ancestors_or_self_starts_with_self(self, navigator, tree):
        """The or-self sequence starts with the node itself."""
        sequence = list(navigator.ancestors_or_self(tree["post"]))

        assert sequence[0] is tree["post"]
        assert ids(sequence) == [1110, 1100, 1000]

    def test_levels_strictly_decrease(self, navigator, tree):
        """Levels strictly decrease along the sequence."""
        for node in tree.values():
            levels = [n.level for n in navigator.ancestors_or_self(node)]
            assert all(x > y for x, y in zip(levels, levels[1:]))

    def test_sequence_is_lazy(self, tree):
        """Parents are fetched only as the sequence is consumed."""
        fetched = []

        class RecordingStore(InMemoryContentStore):
            def get_by_id(self, content_id):
                fetched.append(content_id)
                return super().get_by_id(content_id)

        navigator = TreeNavigator(RecordingStore(tree.values()))
        sequence = navigator.ancestors(tree["comment"])
        assert fetched == []

        next(sequence)
        assert fetched == [1110]

    def test_missing_parent_ends_the_walk(self, tree):
        """A parent absent from the store is treated as the top of the tree."""
        navigator = TreeNavigator(InMemoryContentStore([tree["post"], tree["comment"]]))

        assert ids(navigator.ancestors(tree["comment"])) == [1110]


class TestFilteredAncestors:
    """Test level, alias and class filters."""

    def test_max_level(self, navigator, tree):
        """Only ancestors at or above the level are produced."""
        assert ids(navigator.ancestors(tree["comment"], max_level=2)) == [1100, 1000]

    def test_max_level_or_self_may_exclude_self(self, navigator, tree):
        """The level filter also applies to the starting node."""
        assert ids(navigator.ancestors_or_self(tree["comment"], max_level=1)) == [1000]
        assert ids(navigator.ancestors_or_self(tree["home"], max_level=1)) == [1000]

    def test_content_type_alias_ignores_case(self, navigator, tree):
        """Content type aliases match case-insensitively."""
        assert ids(navigator.ancestors(tree["comment"], content_type_alias="BLOG")) == [1100]

    def test_content_type_alias_or_self(self, navigator, tree):
        """The alias filter also applies to the starting node."""
        result = navigator.ancestors_or_self(tree["post"], content_type_alias="blogpost")

        assert ids(result) == [1110]

    def test_of_type_filters_by_model_class(self, navigator, tree, blog_post_model):
        """Only instances of the model class are produced."""
        assert ids(navigator.ancestors(tree["comment"], of_type=blog_post_model)) == [1110]
        assert list(navigator.ancestors(tree["post"], of_type=blog_post_model)) == []

    def test_conflicting_filters_fail_fast(self, navigator, tree):
        """A level and an alias filter cannot be combined."""
        with pytest.raises(InvalidArgumentError):
            navigator.ancestors(tree["post"], max_level=1, content_type_alias="home")

    def test_custom_predicate_through_walk(self, navigator, tree):
        """Any predicate can drive the walk."""
        even = navigator.walk(tree["comment"], True, lambda n: n.id % 2 == 0)

        assert ids(even) == [1110, 1100, 1000]


class TestSingularAncestors:
    """Test the first-or-none variants."""

    def test_ancestor_is_parent(self, navigator, tree):
        """The first ancestor is the parent."""
        assert navigator.ancestor(tree["post"]) is tree["blog"]

    def test_ancestor_of_top_level_node_is_none(self, navigator, tree):
        """A top-level node has no ancestor."""
        assert navigator.ancestor(tree["home"]) is None

    def test_ancestor_with_alias(self, navigator, tree):
        """The closest ancestor of the type is returned."""
        assert navigator.ancestor(tree["comment"], content_type_alias="home") is tree["home"]
        assert navigator.ancestor(tree["comment"], content_type_alias="missing") is None

    def test_ancestor_or_self_without_filter_is_self(self, navigator, tree):
        """Without filters the node itself is returned."""
        assert navigator.ancestor_or_self(tree["post"]) is tree["post"]

    def test_ancestor_or_self_with_level(self, navigator, tree):
        """The closest node at or above the level is returned."""
        assert navigator.ancestor_or_self(tree["comment"], max_level=2) is tree["blog"]

    def test_ancestor_or_self_of_type(self, navigator, tree, blog_post_model):
        """The closest instance of the model class is returned."""
        assert navigator.ancestor_or_self(tree["post"], of_type=blog_post_model) is tree["post"]
        assert navigator.ancestor_or_self(tree["blog"], of_type=blog_post_model) is None

    def test_parent(self, navigator, tree):
        """Parents are looked up through the store."""
        assert navigator.parent(tree["blog"]) is tree["home"]
        assert navigator.parent(tree["home"]) is None


class TestRelationships:
    """Test path-based relationship checks."""

    def test_descendant_and_ancestor(self, navigator, tree):
        """Relationship checks follow the paths."""
        assert navigator.is_descendant(tree["comment"], tree["home"])
        assert navigator.is_ancestor(tree["home"], tree["comment"])
        assert not navigator.is_descendant(tree["about"], tree["home"])

    def test_or_self(self, navigator, tree):
        """The or-self checks accept the node itself."""
        for node in tree.values():
            assert navigator.is_descendant_or_self(node, node)
            assert navigator.is_ancestor_or_self(node, node)

    def test_none_other_fails_fast(self, navigator, tree):
        """A missing second node is reported by argument name."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            navigator.is_descendant(tree["post"], None)

        assert exc_info.value.argument == "other"


class TestIntegrity:
    """Test argument checks and corrupt-data guards."""

    def test_none_content_fails_before_iteration(self, navigator):
        """A missing node fails when the sequence is requested."""
        with pytest.raises(InvalidArgumentError):
            navigator.ancestors(None)

    def test_cycle_is_detected(self, make_content):
        """Two store entries pointing at each other through stale paths."""
        page = ContentType(alias="page")
        a = make_content(1, "-1,2,1", page)
        b = make_content(2, "-1,1,2", page)
        navigator = TreeNavigator(InMemoryContentStore([a, b]))

        with pytest.raises(TreeIntegrityError) as exc_info:
            list(navigator.ancestors(a))

        assert exc_info.value.content_id == 1

    def test_depth_cap(self, make_content):
        """Chains deeper than the configured cap raise."""
        page = ContentType(alias="page")
        nodes = [make_content(1, "-1,1", page)]
        for content_id in range(2, 7):
            nodes.append(make_content(content_id, f"{nodes[-1].path},{content_id}", page))
        navigator = TreeNavigator(
            InMemoryContentStore(nodes), NavigationSettings(max_depth=3)
        )

        assert len(list(navigator.ancestors(nodes[3]))) == 3
        with pytest.raises(TreeIntegrityError):
            list(navigator.ancestors(nodes[-1]))

    def test_missing_parent_is_logged(self, tree, caplog):
        """A path naming a parent absent from the store logs a warning."""
        navigator = TreeNavigator(InMemoryContentStore([tree["post"], tree["comment"]]))

        with caplog.at_level(logging.WARNING, logger="contenttree.navigation.navigator"):
            assert ids(navigator.ancestors(tree["comment"])) == [1110]

        assert "Parent 1100 of content 1110 is missing from the store" in caplog.text
