# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a small fixed set
of operations. It prints the operations that do the sorting, one per line.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two items of `a`                    |
| `sb`  | swap the top two items of `b`                    |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top item goes to the bottom   |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` down: the bottom item goes to the top |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` together                         |

## Command line

```
pip install .
push_swap 3 2 1
```

prints

```
ra
sa
```

The same command is available as `python -m pushswap.cli 3 2 1`.

The numbers can be passed as separate arguments or as one quoted string
(`push_swap "4 67 3 87 23"`); arguments are joined with spaces and split on
spaces. The first number is the top of stack `a`.

The input is rejected with `Error` on its own line when:

- a token holds a character other than a digit, `+` or `-`, or ends in a sign;
- an argument is empty, or the arguments hold no number at all;
- two tokens read as the same number;
- a sign is doubled (`--5`, `+-5`);
- a value is outside the 32-bit signed integer range.

A token is read like `atol`: an optional sign, then digits up to the first
non-digit. With no arguments nothing is printed. The exit status is always 0.

## Strategy

- two items: at most one swap;
- three items: a fixed table of at most two operations;
- four or five items: the smallest items are pushed to `b`, the remaining
  three are sorted, and `b` is pushed back;
- more: a cost-driven insertion that moves the cheapest item between the
  stacks each time, then rotates the smallest item to the top.

An already sorted input produces no output.

## Library use

```python
from pushswap.sort import push_swap

print(push_swap(["3", "2", "1"]))   # ['ra', 'sa']
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, deques of
  `Item` with the top on the left), exposes every operation as a method
  (`swap_a`, `push_b`, `rotate_both`, `reverse_a`, …) and records the name of
  each operation performed in `moves`. `assign_indices()` ranks the values of
  `a`; `is_sorted()` checks those ranks.
- `pushswap.parsing.parse_arguments` validates command-line tokens, returns a
  `Stacks`, and raises `pushswap.parsing.ParseError` on bad input.
- `pushswap.sort.sort_stacks` sorts an indexed `Stacks` in place with the
  strategy suited to its size; `pushswap.small` and `pushswap.turk` hold the
  individual routines.

## Scope

The package only produces a list of operations. It has no checker that reads
operations from input and verifies that they sort a given list.

## Tests

```
pip install .[test]
pytest
```