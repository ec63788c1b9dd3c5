import itertools
import random

import pytest

from pushswap.cli import main, solve, sort_stacks
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_solve_two_one_three_starts_with_sa():
    operations = solve([2, 1, 3])
    assert operations[0] == "sa"


def test_solve_ordered_input_needs_nothing():
    assert solve([1, 2, 3, 4]) == []


@pytest.mark.parametrize("perm", list(itertools.permutations([3, -1, 7, 0, 12])))
def test_solve_sorts_five_values(perm):
    result = _replay(perm, solve(perm))
    assert list(result.a) == sorted(perm)
    assert not result.b


@pytest.mark.parametrize("perm", list(itertools.permutations([4, 1, 2, 8])))
def test_solve_sorts_four_values(perm):
    result = _replay(perm, solve(perm))
    assert list(result.a) == sorted(perm)


def test_solve_radix_sorts_large_ranks():
    values = list(range(200))
    random.Random(7).shuffle(values)
    result = _replay(values, solve(values))
    assert list(result.a) == list(range(200))
    assert not result.b


def test_solve_leaves_152_values_alone():
    values = list(range(152))
    random.Random(3).shuffle(values)
    assert solve(values) == []


@pytest.mark.parametrize("size", [6, 20, 80])
def test_sort_stacks_medium_keeps_values(size):
    values = random.Random(size).sample(range(1000), size)
    stacks = Stacks(values)
    sort_stacks(stacks)
    assert not stacks.b
    assert sorted(stacks.a) == sorted(values)


def test_main_prints_operations(capsys):
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == solve([2, 1, 3])


def test_main_single_argument_is_split(capsys):
    main(["3 2 1"])
    assert capsys.readouterr().out == "ra\nsa\n"


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "a"], ["1", "1"], ["5", "99999999999"]])
def test_main_reports_error(args, capsys):
    assert main(args) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_matches_solve_for_medium_input(capsys):
    values = random.Random(11).sample(range(-100, 100), 30)
    main([str(v) for v in values])
    assert capsys.readouterr().out.splitlines() == solve(values)