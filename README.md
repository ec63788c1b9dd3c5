# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations. It prints the operations it performs, one per line:

| op    | effect                                   |
|-------|------------------------------------------|
| `sa`  | swap the top two elements of `a`         |
| `sb`  | swap the top two elements of `b`         |
| `ss`  | `sa` and `sb` together                   |
| `pa`  | move the top of `b` onto `a`             |
| `pb`  | move the top of `a` onto `b`             |
| `ra`  | rotate `a` up (top goes to the bottom)   |
| `rb`  | rotate `b` up                            |
| `rr`  | `ra` and `rb` together                   |
| `rra` | rotate `a` down (bottom goes to the top) |
| `rrb` | rotate `b` down                          |
| `rrr` | `rra` and `rrb` together                 |

## Installing

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one space-separated string:

```
push-swap 2 1 3
push-swap "5 4 3 2 1"
```

`python -m pushswap.cli 2 1 3` does the same.

The first number is the top of stack `a`.

- With several arguments, each one must be an optionally signed run of
  digits, fit in 32 bits and not repeat another; otherwise `Error` is
  printed on standard output.
- A single argument is split on spaces and each piece is read for its
  leading integer without those checks; a string with no pieces at all
  prints `Error`.
- With no arguments, or with numbers already in strictly ascending order,
  nothing is printed.

The exit status is 0 in every case.

How the sort is chosen depends on the size of `a`:

- five or fewer values: fixed move sequences (`pushswap.small_sort`);
- 6 to 151 values: split into `b` by quarter and median pivots, then merged
  back (`pushswap.chunk_sort`);
- more than 152 values: binary radix sort (`pushswap.radix`), which gives a
  sorted result only when the values are the ranks `0 .. n-1`;
- exactly 152 values: no operations are performed.

## Library use

```python
from pushswap.cli import solve

ops = solve([2, 1, 3])   # ["sa"]
```

`pushswap.stacks.Stacks(values, sink=None)` holds the two stacks as
`a` and `b` (top at index 0). Every operation that takes effect is appended
to `operations` and passed to `sink` when one is given. The module also
provides `ordered`, `reversed_order`, `find_big` and `find_small`.

`pushswap.parsing` reads arguments: `parse_arguments`, `check_input`
(raises `InputError`), `atoi`, `atoi_checked` and `split_words`.

`pushswap.cli.sort_stacks` applies the size-based strategy above to a
`Stacks`. `pushswap.chunk_sort.put_back` raises `ValueError` when a value on
`b` finds no place on `a`.

## Replaying a solution

`pushswap.queues.Queues` replays a list of operations forwards and backwards.
`start` replaces each input value with its rank and empties `queue_b`:

```python
from pushswap.queues import Queues

q = Queues()
q.start([2, 10, 4])          # queue_a becomes [0, 2, 1]
q.commands.extend(["sa"])
q.step()                     # applies "sa"
q.step_back()                # undoes it
```

`commands` and `executed_commands` are deques; `executed_commands` holds the
most recent command first. Unknown command names are moved between the two
without changing the stacks.

`pushswap.runner.PushSwap(path="./push_swap")` runs `path numbers` through
the shell and keeps the lines it prints in `commands`; it raises
`RuntimeError` when the shell cannot be started.

`pushswap.textsplit` provides `split_to_strings` and `split_to_ints`, and
`pushswap.visual` provides `generate_values` (the integers `1..size` in
random order) and `bar_color` (an RGBA tuple on a blue-cyan-green-yellow-red
ramp for a ratio in `[0, 1)`).

## What it does not do

There is no graphical viewer: the package has no window, bars or controls to
watch a solution being played. `Queues`, `PushSwap` and the helpers in
`pushswap.visual` are the pieces such a viewer would be built on.

## Tests

```
pip install ".[test]"
pytest
```