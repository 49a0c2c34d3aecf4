# problemset

A collection of solved competitive programming problems. Each problem is a
plain Python function that takes the problem's values and returns its answer.
Each group of problems can also be run on the problem's text input format,
either from Python or from the command line.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Using the functions

The problems are grouped by their letter:

- `problemset.tasks_a` holds the "A" problems, such as `max_dominoes`,
  `is_reversed`, `smallest_word`, `balanced_shuffle` and `max_draws`.
- `problemset.tasks_b` holds the "B" problems, such as `min_hours`,
  `process_queries`, `kill_order`, `type_text` and `queue_after`.
- `problemset.tasks_cdef` holds the "C" to "F" problems, such as
  `min_operations_divisible`, `apple_tree_counts`, `circle_center`,
  `largest_lake` and `snowflake_params`.

```python
from problemset.tasks_a import is_reversed, max_dominoes

max_dominoes(3, 3)            # 4
is_reversed("code", "edoc")   # True
```

Where the input does not make sense, such as a grid of the wrong size or an
index out of range, the functions raise `ValueError` (`process_queries` raises
`IndexError` for a bad index).

## Running a problem on its text input

Every module also offers `run(problem, text)`. It takes a problem name, such
as `"50A"`, `"1979A"`, `"1679B"` or `"1829F"`, and the whole input of that
problem as text in the format the problem statement gives, and returns the
expected output text, one answer per line.

```python
from problemset import tasks_a

tasks_a.run("50A", "3 3\n")   # "4\n"
```

`run` raises `ValueError` for a problem name the module does not know, and
when the input ends before all the values have been read.

## Command line

The `problemset` command solves one problem and prints its answer:

```
problemset 50A input.txt
problemset 1829F < input.txt
```

The input is read from the given file, or from standard input when no file is
named. `problemset --list` prints the names of all known problems, and
`problemset --help` shows the options. If the input cannot be read or does not
fit the problem, the command prints the error to standard error and exits with
status 1.

Only the problems listed by `problemset --list` are covered; the package does
not fetch problems, submit answers or judge outputs.