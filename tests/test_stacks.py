import pytest

from pushswap.stacks import Stacks, find_big, find_small, ordered, reversed_order

START = [1, 2, 3, 4]


def make_b(values):
    stacks = Stacks()
    stacks.b.extend(values)
    return stacks


def test_initial_state():
    stacks = Stacks(START)
    assert list(stacks.a) == START
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_sa_swaps_top_two():
    stacks = Stacks(START)
    stacks.sa()
    assert stacks.a[0] == START[1]
    assert stacks.a[1] == START[0]
    assert list(stacks.a)[2:] == START[2:]
    assert stacks.operations == ["sa"]


def test_sb_swaps_top_two_of_b():
    stacks = make_b(START)
    stacks.sb()
    assert stacks.b[0] == START[1]
    assert stacks.b[1] == START[0]
    assert stacks.operations == ["sb"]


def test_swap_on_short_stack_is_noop_but_recorded():
    stacks = Stacks([7])
    stacks.sa()
    assert list(stacks.a) == [7]
    assert stacks.operations == ["sa"]


def test_ss_swaps_both():
    stacks = Stacks(START)
    stacks.b.extend(START)
    stacks.ss()
    assert stacks.a[0] == START[1]
    assert stacks.b[0] == START[1]
    assert stacks.operations == ["ss"]


def test_pb_then_pa_round_trip():
    stacks = Stacks(START)
    stacks.pb()
    assert stacks.a[0] == START[1]
    assert stacks.b[0] == START[0]
    stacks.pa()
    assert list(stacks.a) == START
    assert list(stacks.b) == []
    assert stacks.operations == ["pb", "pa"]


def test_push_from_empty_does_nothing():
    stacks = Stacks()
    stacks.pa()
    stacks.pb()
    assert list(stacks.a) == []
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_ra_moves_top_to_bottom():
    stacks = Stacks(START)
    stacks.ra()
    assert stacks.a[0] == START[1]
    assert stacks.a[-1] == START[0]
    assert stacks.operations == ["ra"]


def test_rb_moves_top_to_bottom():
    stacks = make_b(START)
    stacks.rb()
    assert stacks.b[0] == START[1]
    assert stacks.b[-1] == START[0]


def test_rra_moves_bottom_to_top():
    stacks = Stacks(START)
    stacks.rra()
    assert stacks.a[0] == START[-1]
    assert stacks.a[-1] == START[-2]
    assert stacks.operations == ["rra"]


def test_rrb_moves_bottom_to_top():
    stacks = make_b(START)
    stacks.rrb()
    assert stacks.b[0] == START[-1]
    assert stacks.b[-1] == START[-2]


def test_rotations_are_inverse():
    stacks = Stacks(START)
    stacks.b.extend(START)
    stacks.ra()
    stacks.rra()
    stacks.rr()
    stacks.rrr()
    assert list(stacks.a) == START
    assert list(stacks.b) == START
    assert stacks.operations == ["ra", "rra", "rr", "rrr"]


def test_sink_receives_operations():
    seen = []
    stacks = Stacks(START, sink=seen.append)
    stacks.pb()
    stacks.sa()
    stacks.rrb()
    assert seen == ["pb", "sa", "rrb"]
    assert seen == stacks.operations


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], True), ([1, 3, 2], False), ([2, 2], False), ([5], True)],
)
def test_ordered(values, expected):
    assert ordered(values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [([3, 2, 1], True), ([3, 1, 2], False), ([2, 2], False), ([5], True)],
)
def test_reversed_order(values, expected):
    assert reversed_order(values) is expected


def test_find_big_and_small():
    values = [4, -7, 12, 0]
    assert find_big(values) == 12
    assert find_small(values) == -7


def test_find_on_empty_raises():
    with pytest.raises(ValueError):
        find_small([])
    with pytest.raises(ValueError):
        find_big([])