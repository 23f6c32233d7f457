# ecpuzzles

Solvers for two puzzles. Each command reads a puzzle input file and prints
three answers, one per line.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Problem 19: the score tree

Each input line has three whitespace-separated fields: a name, a separator
word (ignored), and an integer key. The lines up to the first empty line are
inserted into a binary search tree (`ecpuzzles.tree.Tree`) keyed on the
integer; a repeated key is an error. After the empty line come two more such
lines, the query pairs.

    ecpuzzles-problem19 input.txt

prints:

1. the height of the tree times the greatest total of keys reached on any one
   level;
2. the names along the search path for the key 500000, joined with `-`;
3. the name of the deepest node that lies on the search paths of both query
   keys.

Exit codes: 1 when no file is given, 2 when the file cannot be opened, 3 when
it cannot be parsed.

From Python:

    from ecpuzzles.problem19 import Solution

    with open("input.txt") as handle:
        solution = Solution.parse(handle)
    print(solution.part1(), solution.part2(), solution.part3())

`Solution.parse` raises `ValueError` on malformed input.

## Problem 22: the debris field

Each non-blank input line is a rule (`ecpuzzles.rule.Rule`, read by
`parse_rule`) giving four factors, a divisor, a remainder and a
four-dimensional velocity. A point holds debris when the dot product of the
point and the factors leaves the remainder modulo the divisor. The default
field starts at `0,0,0,-1` with size `10,15,60,3`; another size may be given
as a comma-separated second argument, and missing trailing values keep their
defaults.

    ecpuzzles-problem22 input.txt
    ecpuzzles-problem22 input.txt 3,3,5,3

prints:

1. the number of debris points;
2. the fewest steps from the origin to the far corner without touching debris;
3. the fewest steps to the far corner arriving with exactly three hits.

Exit codes: 1 for usage or an invalid size, 2 when the file cannot be opened,
3 when it cannot be parsed, 4 when no route exists.

From Python:

    from ecpuzzles.problem22 import DEFAULT_LOW, Solution, parse_rules, parse_size
    from ecpuzzles.ranges import Range

    with open("input.txt") as handle:
        rules = parse_rules(handle)
    bounds = Range.from_min_and_size(DEFAULT_LOW, parse_size("10,15,60,3"))
    solution = Solution(rules, bounds)
    print(solution.part1(), solution.part2(), solution.part3())

The three parts share one debris schedule: `part2` and `part3` build it by
calling `part1` if it has not run yet, and they mark it as they search, so run
the parts once each, in order. `part2` and `part3` raise `RuntimeError` when
the far corner cannot be reached.

## Building blocks

- `ecpuzzles.point`: immutable integer `Point`s with `+`, `-`, `replace`,
  `project`, plus `dot`, `lcm` and `parse_point`.
- `ecpuzzles.ranges`: inclusive boxes (`Range`) with `contains`, row-major
  `index`/`try_index`, wrap-around `wrap`, iteration over every point, and
  `parse_range` for text such as `0,0~3,4`.