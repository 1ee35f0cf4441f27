"""Tests for NavigationStack."""

from diskring.chart.navigation import NavigationStack
from diskring.snapshot.models import Entry

C = Entry("/root/B/C", 10, True)
B = Entry("/root/B", 10, True, (C,))
ROOT = Entry("/root", 30, True, (B,))


class TestNavigationStack:
    """Tests for NavigationStack class."""

    def test_empty_stack_shows_scan_root(self):
        navigation = NavigationStack()

        assert navigation.current_root(ROOT) is ROOT
        assert navigation.depth == 0

    def test_expand_moves_front(self):
        navigation = NavigationStack()
        navigation.expand(B)
        navigation.expand(C)

        assert navigation.current_root(ROOT) is C
        assert list(navigation) == [C, B]
        assert len(navigation) == 2

    def test_collapse_returns_to_previous(self):
        navigation = NavigationStack()
        navigation.expand(B)
        navigation.expand(C)

        assert navigation.collapse() is C
        assert navigation.current_root(ROOT) is B
        assert navigation.collapse() is B
        assert navigation.current_root(ROOT) is ROOT

    def test_collapse_empty_is_noop(self):
        navigation = NavigationStack()
        assert navigation.collapse() is None
        assert navigation.current_root(ROOT) is ROOT

    def test_clear(self):
        navigation = NavigationStack()
        navigation.expand(B)
        navigation.clear()

        assert navigation.depth == 0
        assert navigation.current_root(ROOT) is ROOT
