"""Tests for clone and the frozen views."""

import pytest as _pytest

import nestconf.merge as merge


class TestClone:
    """Structural clone over dicts and lists."""

    def test_equal_but_independent(self) -> None:
        """Dicts and lists at every depth are new objects."""
        data = {"a": [{"b": [1]}], "c": {"d": 2}}
        copied = merge.clone(data)

        assert copied == data
        assert copied is not data
        assert copied["a"] is not data["a"]
        assert copied["a"][0] is not data["a"][0]
        assert copied["c"] is not data["c"]

    def test_leaves_are_shared(self) -> None:
        """Non-container values are returned as-is."""
        leaf = object()
        assert merge.clone(leaf) is leaf
        assert merge.clone({"x": leaf})["x"] is leaf

    def test_tuple_is_a_leaf(self) -> None:
        """Tuples are immutable and are not rebuilt."""
        value = (1, [2])
        assert merge.clone(value) is value


class TestFrozenViews:
    """Read-only wrappers used for stored defaults."""

    def test_mapping_reads_through(self) -> None:
        """Values are reachable, nested containers are frozen."""
        view = merge.FrozenMapping({"a": {"b": [1, 2]}})

        assert view["a"]["b"][0] == 1
        assert isinstance(view["a"], merge.FrozenMapping)
        assert isinstance(view["a"]["b"], merge.FrozenSequence)

    def test_mapping_rejects_assignment(self) -> None:
        """No item assignment through the view."""
        view = merge.FrozenMapping({"a": 1})
        with _pytest.raises(TypeError):
            view["a"] = 2  # type: ignore[index]

    def test_sequence_has_no_append(self) -> None:
        """Lists are exposed without mutating methods."""
        view = merge.freeze([1, 2])
        assert not hasattr(view, "append")
        assert view == [1, 2]
        assert view[0:1] == [1]

    def test_equality_with_plain_data(self) -> None:
        """Views compare equal to the data they wrap."""
        assert merge.FrozenMapping({"a": [1]}) == {"a": [1]}
        assert merge.freeze([1]) != "1"

    def test_thaw_returns_independent_copy(self) -> None:
        """thaw() gives a mutable copy that does not touch the original."""
        data = {"a": [1]}
        thawed = merge.FrozenMapping(data).thaw()

        thawed["a"].append(2)
        assert data == {"a": [1]}

    def test_views_are_unhashable(self) -> None:
        """Views wrap mutable data and cannot be hashed."""
        with _pytest.raises(TypeError):
            hash(merge.FrozenMapping({}))

    def test_freeze_passes_leaves_through(self) -> None:
        """Scalars come back unchanged."""
        assert merge.freeze("text") == "text"
        assert merge.freeze(None) is None
