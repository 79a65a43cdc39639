# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
small instruction set. The package installs two commands:

- `push-swap` prints, one per line, a sequence of instructions that sorts the
  numbers given as arguments.
- `push-swap-checker` reads instructions from standard input, applies them to
  the numbers given as arguments and prints `OK` when stack **a** ends up in
  ascending order with **b** empty, and `KO` otherwise.

## Instructions

| name  | effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of a                 |
| `sb`  | swap the top two elements of b                 |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of b onto a                       |
| `pb`  | move the top of a onto b                       |
| `ra`  | rotate a up (the first element becomes last)   |
| `rb`  | rotate b up                                    |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate a down (the last element becomes first) |
| `rrb` | rotate b down                                  |
| `rrr` | `rra` and `rrb` together                       |

An instruction on a stack with too few elements does nothing.

## Usage

```
pip install .
push-swap 3 2 5 1 4
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

Numbers can be given as separate arguments or as one string separated by
spaces; only digits, `-` and spaces are accepted. A token that is not a
32-bit integer, or a duplicate number, makes both commands print `Error` on
standard error. With no arguments, or a single number, neither command prints
anything. An input that is already sorted gives no instructions.

The checker expects every instruction on its own line, each line ending in a
newline; an unknown instruction, an empty line or a missing final newline is
an error.

## How it sorts

- Up to five numbers: a fixed short sequence for each arrangement
  (`pushswap.small_sort.sort_small`).
- Six to 749 numbers: a cost-driven insertion sort
  (`pushswap.insertion_sort.insertion_sort`) is run in four modes, and the
  shortest result is kept.
- 750 numbers or more: the insertion sort in mode 1 only.

## From Python

```python
from pushswap.solver import solve
from pushswap.checker import run_checker

ops = solve([3, 2, 5, 1, 4])
print(run_checker([3, 2, 5, 1, 4], "".join(f"{op}\n" for op in ops)))  # OK
```

- `pushswap.parsing` — `parse_numbers`, `split_arguments`,
  `is_valid_integer`, `clamp_atoi`, `rank_values`, and the `InputError`
  raised on bad input.
- `pushswap.stacks` — `Stacks` with one method per instruction, `apply`,
  `is_sorted` and an optional `on_operation` callback; the `Operation` enum.
- `pushswap.checker` — `parse_instructions` and `run_checker`.
- `pushswap.visualizer` — `render_frame(stacks, command, operations_count)`
  returns a coloured terminal frame showing both stacks after an operation;
  `colored_cell` and `number_width` are its building blocks.

## What it does not do

There is no command that animates a sort in the terminal. `render_frame`
only returns the text of one frame; hooking it to `Stacks(on_operation=...)`
and printing the frames is left to the caller.

## Tests

```
pip install .[test]
pytest
```