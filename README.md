# advent2021

Solutions to selected days of a 2021 advent puzzle calendar. It is a plain
Python library that needs only the standard library.

Each day is a module:

| Module | Puzzle |
| --- | --- |
| `advent2021.day07` | crab alignment: cheapest horizontal position |
| `advent2021.day08` | seven-segment display decoding |
| `advent2021.day09` | smoke basin height map |
| `advent2021.day10` | bracket syntax scoring |
| `advent2021.day13` | transparent origami folds |
| `advent2021.day16` | BITS packet decoder |
| `advent2021.day18` | snailfish number arithmetic |
| `advent2021.day19` | 3D beacon scanner alignment |
| `advent2021.day21` | Dirac dice |
| `advent2021.day22` | reactor reboot cube counting |
| `advent2021.day23` | amphipod burrow sorting |
| `advent2021.day25` | sea cucumber herds |

Each module has a `part1(text)` function. All but `day25` also have a
`part2(text)` function. Both take the puzzle input as a string and return
the answer as an integer.

```python
from pathlib import Path

from advent2021 import day07

text = Path("input.txt").read_text()
print(day07.part1(text), day07.part2(text))
```

## Building blocks

The pieces behind each answer are public too. You can use them on their
own:

```python
from advent2021.day16 import PacketParser

packet = next(PacketParser.from_hex("C200B40A82"))
print(packet.eval())         # 3
print(packet.version_sum())
```

```python
from advent2021.day10 import CorruptedError, parse_expr

try:
    parse_expr("{([(<{}[<>[]}>{[]{[(<()>")
except CorruptedError as err:
    print(err)  # Expression corrupted: expected ], but found } instead
```

```python
from advent2021.day18 import add, magnitude, parse

total = add(parse("[[1,2],3]"), parse("[4,5]"))
print(magnitude(total))
```

Some other examples:

- `day09.HeightMap` finds low points and basin sizes.
- `day13.Point.fold` folds a point along a `day13.Fold`.
- `day19.Scanner.matches` places one scanner relative to another.
- `day22.diff` takes one rectangle away from a list of rectangles.
- `day23.Burrow.parse(text, depth)` reads a burrow diagram, and
  `day23.solve` finds its lowest sorting cost.
- `day25.Grid.step` moves both herds once and reports whether anything
  moved.

Some days have other versions of the same part. `day07.part1_select_nth`
and `day18.part2_permutator`, `day18.part2_permutator_gen` and
`day18.part2_itertools` give the same result as the main version by a
different method.

## What is not included

The library covers only the days listed above. It has no modules for the
other days of the calendar. It also has no command-line program, so you
read the input and call the functions yourself.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```