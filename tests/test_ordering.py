import pytest

from iockit.ordering import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    OrderMetadata,
    Ordered,
    PriorityOrdered,
    compare,
    metadata_of,
    sort_by_order,
)


class PriorityStep:
    def __init__(self, name, order):
        self.name = name
        self._order = order

    def order(self):
        return self._order

    def priority_order(self):
        pass

    def __str__(self):
        return self.name


class OrderedStep:
    def __init__(self, name, order):
        self.name = name
        self._order = order

    def order(self):
        return self._order

    def __str__(self):
        return self.name


class PlainStep:
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name


def test_sort_example():
    steps = [
        OrderedStep("ordered", 10),
        PriorityStep("priority", 5),
        OrderedStep("fallback", 20),
    ]
    sort_by_order(steps)
    assert [str(step) for step in steps] == ["priority", "ordered", "fallback"]


def test_sort_priority_then_ordered_then_unordered():
    values = [
        PlainStep("unordered"),
        OrderedStep("ordered", 10),
        PriorityStep("priority", 100),
        OrderedStep("ordered-low", 0),
    ]
    sort_by_order(values)
    assert [str(v) for v in values] == ["priority", "ordered-low", "ordered", "unordered"]


def test_sort_is_stable_for_ties_and_unordered():
    values = [
        PlainStep("a"),
        OrderedStep("x", 1),
        PlainStep("b"),
        OrderedStep("y", 1),
        PlainStep("c"),
    ]
    sort_by_order(values)
    assert [str(v) for v in values] == ["x", "y", "a", "b", "c"]


def test_metadata_of():
    assert metadata_of(PriorityStep("p", 7)) == OrderMetadata(tier=0, order=7)
    assert metadata_of(OrderedStep("o", 3)) == OrderMetadata(tier=1, order=3)
    assert metadata_of(PlainStep("u")) is None
    assert metadata_of(None) is None


@pytest.mark.parametrize(
    "left, right, sign",
    [
        (PriorityStep("p", 100), OrderedStep("o", 0), -1),
        (OrderedStep("o", 0), PriorityStep("p", 100), 1),
        (OrderedStep("a", 0), OrderedStep("b", 10), -1),
        (OrderedStep("a", 5), OrderedStep("b", 5), 0),
        (OrderedStep("a", 5), PlainStep("u"), -1),
        (PlainStep("u"), OrderedStep("a", 5), 1),
        (PlainStep("u"), PlainStep("v"), 0),
    ],
)
def test_compare_sign(left, right, sign):
    result = compare(left, right)
    assert (result > 0) - (result < 0) == sign


def test_precedence_bounds_sort_to_ends():
    values = [
        OrderedStep("mid", 0),
        OrderedStep("last", LOWEST_PRECEDENCE),
        OrderedStep("first", HIGHEST_PRECEDENCE),
    ]
    sort_by_order(values)
    assert [str(v) for v in values] == ["first", "mid", "last"]


def test_protocols_are_structural():
    ordered = OrderedStep("o", 1)
    priority = PriorityStep("p", 1)
    assert isinstance(ordered, Ordered) is True
    assert isinstance(priority, PriorityOrdered) is True
    assert isinstance(ordered, PriorityOrdered) is False
    assert metadata_of(ordered) == OrderMetadata(tier=1, order=1)
    assert metadata_of(priority) == OrderMetadata(tier=0, order=1)