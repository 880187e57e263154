"""
Tests for the union-find used to merge provisional blob labels.
"""

import pytest

from fotoloc.blobs.union_find import UnionFind


class TestUnionFindBasics:
    """Tests for add and find."""

    def test_added_element_is_its_own_representative(self):
        """Test that a freshly added element finds itself."""
        uf = UnionFind(not_found=0)
        uf.add(5)

        assert uf.find(5) == 5
        assert 5 in uf
        assert len(uf) == 1

    def test_find_unknown_returns_not_found(self):
        """Test that find on an absent element returns the sentinel."""
        uf = UnionFind(not_found=0)
        uf.add(1)

        assert uf.find(42) == 0
        assert uf.not_found == 0

    def test_find_unknown_does_not_add(self):
        """Test that looking up an absent element leaves the set unchanged."""
        uf = UnionFind(not_found=0)
        uf.find(7)

        assert 7 not in uf
        assert len(uf) == 0

    def test_add_is_idempotent(self):
        """Test that adding an element twice keeps one element."""
        uf = UnionFind(not_found=0)
        uf.add(1)
        uf.add(1)

        assert len(uf) == 1

    def test_add_existing_keeps_its_set(self):
        """Test that re-adding a joined element does not split it off."""
        uf = UnionFind(not_found=0)
        uf.join(1, 2)
        uf.add(1)

        assert uf.find(1) == uf.find(2)

    def test_other_sentinel_and_element_types(self):
        """Test that any hashable element type works with its own sentinel."""
        uf = UnionFind(not_found=None)
        uf.join("a", "b")

        assert uf.find("a") == uf.find("b")
        assert uf.find("z") is None


class TestUnionFindJoin:
    """Tests for join."""

    def test_join_merges_sets(self):
        """Test that joined elements share a representative."""
        uf = UnionFind(not_found=0)
        uf.add(1)
        uf.add(2)
        root = uf.join(1, 2)

        assert uf.find(1) == uf.find(2) == root

    def test_join_adds_missing_elements(self):
        """Test that join adds elements it hasn't seen."""
        uf = UnionFind(not_found=0)
        uf.join(3, 4)

        assert 3 in uf
        assert 4 in uf
        assert uf.find(3) == uf.find(4)

    def test_join_is_transitive(self):
        """Test that joining two sets connects all of their elements."""
        uf = UnionFind(not_found=0)
        uf.join(1, 2)
        uf.join(3, 4)

        assert uf.find(1) != uf.find(4)

        uf.join(2, 3)

        rep = uf.find(1)
        assert all(uf.find(e) == rep for e in (1, 2, 3, 4))

    def test_join_order_does_not_matter(self):
        """Test that join(a, b) and join(b, a) give the same partition."""
        forward = UnionFind(not_found=0)
        backward = UnionFind(not_found=0)
        pairs = [(1, 2), (3, 4), (5, 6), (2, 5)]

        for a, b in pairs:
            forward.join(a, b)
            backward.join(b, a)

        for a in range(1, 7):
            for b in range(1, 7):
                same_forward = forward.find(a) == forward.find(b)
                assert same_forward == (backward.find(a) == backward.find(b))

    def test_join_same_set_is_noop(self):
        """Test that joining already connected elements changes nothing."""
        uf = UnionFind(not_found=0)
        root = uf.join(1, 2)

        assert uf.join(2, 1) == root
        assert uf.find(1) == root

    def test_unknown_never_matches_a_set(self):
        """Test that an unknown element never shares a known representative."""
        uf = UnionFind(not_found=0)
        uf.join(1, 2)

        assert uf.find(99) == uf.not_found
        assert uf.find(99) not in (uf.find(1), uf.find(2))

    def test_long_chain_resolves(self):
        """Test that a long chain of joins resolves to a single set."""
        uf = UnionFind(not_found=0)
        for i in range(1, 1000):
            uf.join(i, i + 1)

        rep = uf.find(1)
        assert uf.find(1000) == rep
        assert uf.find(500) == rep
        # Repeated lookups are stable
        assert uf.find(1) == rep


@pytest.mark.parametrize("order", [(1, 2, 3), (3, 2, 1), (2, 3, 1)])
def test_representative_independent_of_lookup_order(order):
    """Test that every element of a set reports the same representative."""
    uf = UnionFind(not_found=0)
    uf.join(1, 2)
    uf.join(2, 3)

    reps = {uf.find(e) for e in order}
    assert len(reps) == 1
