# rangekit

Small, dependency-free building blocks for range queries over sequences and
integer coordinates:

- `rangekit.segment_tree`: `SegmentTree` over any associative operation with
  an identity, with range folds (`fold`), point reads and writes (`get`,
  `set`, `update`) and monotone binary searches (`find_index_to_start`,
  `find_index_to_end`). `with_folded`, `with_getter` and `with_setter` return
  copies whose results or stored values pass through a conversion.
- `rangekit.segment_tree_util`: ready-made trees (`segment_tree_new_min`,
  `segment_tree_new_max`, `segment_tree_new_sum`) and the builders behind
  them (`SegmentTreeMinBuilder`, `SegmentTreeMaxBuilder`,
  `SegmentTreeSumBuilder`) for custom orderings, identities and operations.
- `rangekit.shrink`: coordinate compression (`shrink`, `Shrink`) that keeps
  every given value as a cell of its own and each gap between them as one
  more cell. Indices, half-open slices and inclusive `Interval`s can be
  compressed; `unshrink` gives back the coordinates behind a cell.
- `rangekit.paint_rect`: the number of integer cells covered by a union of
  axis-aligned rectangles (`paint_rect`, `paint_rect_calc_area`, `Rect`).
- `rangekit.permutation`: 0-indexed `Permutation`s with inverse,
  composition (`compose` or `*`), cycle decomposition (`loops`, `loop_of`),
  transpositions, and `is_permutation0`.
- `rangekit.bounds`: `WithMax` and `WithMin`, a value or a sentinel. In both,
  the sentinel compares greater than every plain value.
- `rangekit.with_size`: `WithSize`, a value tagged with the size of the range
  it stands for.
- `rangekit.chunk_by`: `chunk_by` and `chunk_by_reversed`, which split a
  sequence into runs of neighbours satisfying a predicate.

## Installation

```
pip install rangekit
```

## Examples

A max segment tree:

```python
from rangekit.segment_tree_util import segment_tree_new_max

seg = segment_tree_new_max([1, 4, 2, 3, 8, 3, 4])
seg.fold(slice(1, 5))                               # 8
seg.set(4, 0)
seg.fold()                                          # 4, the whole range
seg.find_index_to_end(0, lambda x, _r: x < 4)       # 1
```

A segment tree over any associative operation with an identity:

```python
from rangekit.segment_tree import segment_tree_new

seg = segment_tree_new([1, 4, 2, 3], lambda a, b: a + b, lambda: 0)
seg.fold(slice(0, 3))                               # 7
```

Area of a union of rectangles; `add` takes a half-open rectangle,
`add_inclusive` a closed one:

```python
from rangekit.paint_rect import paint_rect

area = paint_rect().add(0, 0, 2, 2).add_inclusive(1, 1, 2, 2).calc_area()
# area == 7
```

Coordinate compression:

```python
from rangekit.shrink import shrink

s = shrink([1, 1, 10, 1])
s.shrinked_len()      # 3: the cells are {1}, 2..9 and {10}
s.shrink(10)          # 2
s.shrink(slice(2, 10))  # slice(1, 2)
s.unshrink(1).count() # 8
```

A boundary that falls inside a cell cannot be compressed: `try_shrink`
returns `None` and `shrink` raises `BoundaryNotShrinkableError`.

Permutations:

```python
from rangekit.permutation import Permutation

p = Permutation([4, 5, 1, 3, 2, 0, 7, 8, 6])
p.loops()        # [[0, 4, 2, 1, 5], [3], [6, 7, 8]]
p.inverse()[4]   # 0
```

## What it does not do

rangekit is a library only: it has no command-line program. The segment
trees support point updates only; there is no public range-update (lazy)
segment tree.

## Running the tests

```
pip install -e ".[test]"
pytest
```