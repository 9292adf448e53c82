# algokit

Classic competitive-programming problems solved as plain, tested Python
functions: Roman numerals, a Sudoku solver, graph searches, number theory,
interval sweeps, geometry and string puzzles.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Roman numerals

`algokit-roman` reads whitespace-separated tokens from standard input. For
each one it prints the decimal value if the token is a Roman numeral written
in its canonical form, or `This is not a valid number` otherwise.

```
echo "XIV MMXXIV IIII" | algokit-roman
```

### Sudoku

`algokit-sudoku` reads a count followed by that many boards, each written as
81 characters with `.` (or `0`) for an empty cell. For every board it prints
`Y` and the solved board in the same format, or `N` when the board has no
solution.

```
algokit-sudoku < puzzles.txt
```

## Library

Each module groups related problems:

| Module | Contents |
| --- | --- |
| `algokit.roman` | `to_roman`, `to_decimal`, `parse_roman`, `main` |
| `algokit.sudoku` | `parse_board`, `format_board`, `solve`, `is_complete`, `render_grid`, `main` |
| `algokit.intro` | `min_apple_difference`, `can_empty_piles`, `digit_at`, `gray_codes`, `hanoi_moves`, `trailing_zeros`, `two_knights` |
| `algokit.uva` | `is_light_on`, `process_queue` |
| `algokit.pipes` | `count_components` |
| `algokit.graphs` | `artistic_distance`, `best_permutation`, `rebuild_tree`, `count_balanced_subtrees`, `strongly_connected_components`, `min_edges_to_strongly_connect` |
| `algokit.labyrinth` | `find_path` |
| `algokit.numtheory` | `count_unit_fraction_solutions`, `t_prime_set`, `is_t_prime`, `central_binomial_mod` |
| `algokit.arrays` | `min_digit_permutation_difference`, `not_equal_positions`, `minimal_product`, `table_is_stable`, `saved_mice`, `count_pairs` |
| `algokit.text` | `katastrophic_compare`, `group_expansions`, `longest_common_subsequence`, `extra_letters` |
| `algokit.geometry` | `Rectangle`, `visible_billboard_area`, `tarp_area`, `shortest_walk` |
| `algokit.structures` | `ThorNotifications`, `glass_carving`, `first_cheating_move`, `max_customers`, `allocate_rooms` |

Functions take Python values and return results; malformed input raises
`ValueError`. Where a problem can have no answer, the function says so in
its return value: `find_path`, `minimal_product`, `extra_letters` and
`sudoku.solve` return `None`, while `artistic_distance` and
`first_cheating_move` return `-1`.

A few examples:

```python
from algokit.roman import to_roman, parse_roman
from algokit.intro import trailing_zeros, gray_codes, hanoi_moves

to_roman(1994)        # "MCMXCIV"
parse_roman("XIV")    # 14
trailing_zeros(20)    # 4
gray_codes(2)         # ["00", "01", "11", "10"]
hanoi_moves(2)        # [(1, 2), (1, 3), (2, 3)]
```

`ThorNotifications` keeps state across events; each method returns the
number of unread notifications afterwards:

```python
from algokit.structures import ThorNotifications

phone = ThorNotifications()
phone.notify(3)       # 1
phone.notify(1)       # 2
phone.read_app(3)     # 1
```

## What it does not do

Only the Roman numeral and Sudoku problems come with commands. The other
problems are library functions only: there is no command that reads their
input format from standard input or prints their answers.