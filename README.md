# chessbits

Building blocks for chess engines, in plain Python with no third-party
dependencies.

- **Bitboards** (`chessbits.bitboard`): squares are integers 0..63 (a1 = 0,
  h8 = 63), bitboards are Python integers. `Color` and `PieceType` enums,
  file/rank constants such as `FILE_A_BB` and `RANK_8_BB`, and helpers
  `make_square`, `file_of`, `rank_of`, `square_bb`, `shift`,
  `pawn_attacks_bb`, `pawn_double_attacks_bb`, `adjacent_files_bb`,
  `forward_ranks_bb`, `forward_file_bb`, `pawn_attack_span`,
  `passed_pawn_span`, `distance`, `file_distance`, `rank_distance`,
  `edge_distance`, `popcount`, `lsb`, `msb`, `least_significant_square_bb`,
  `iter_squares` and `frontmost_sq`. Off-board squares and empty bitboards
  passed to `lsb`/`msb` raise `ValueError`.
- **Attack tables** (`chessbits.attacks`): `attacks_bb(piece_type, s,
  occupied)` for knights, bishops, rooks, queens and kings; `pawn_attacks`,
  `pseudo_attacks` (empty board), `sliding_attack`, `line_bb`, `between_bb`,
  `aligned`, and `pretty` for an ASCII drawing of a bitboard.
- **KPK bitbase** (`chessbits.bitbase`): an exact win/draw table for king and
  pawn against king, built by retrograde iteration. Use the module-level
  `probe` or a `KPKBitbase` instance; `bitbase_index` gives a position's
  index. The pawn belongs to white and must stand on files a to d, ranks 2
  to 7; mirror other positions before probing.
- **Utilities** (`chessbits.misc`): the xorshift64* `PRNG` (`rand`,
  `sparse_rand`), an integer `RunningAverage`, a fixed power-of-two
  `HashTable` addressed by the low bits of a key, and `mul_hi64`.
- **Diagnostics** (`chessbits.diagnostics`): `DebugStats` collects hit rates,
  means, standard deviations and correlations in numbered slots and returns
  them as text from `report()`; `engine_info` returns the name and version
  line; `binary_directory` works out an executable's directory from its
  path.
- **Benchmark lists** (`chessbits.benchmark`): `setup_bench` builds the list
  of UCI commands a `bench` run executes, over a built-in set of test
  positions, a given position or a file of FENs.

## Installation

```
pip install .
```

## Examples

```python
from chessbits.attacks import attacks_bb, pretty
from chessbits.bitboard import PieceType, make_square, popcount

d4 = make_square(3, 3)
rook = attacks_bb(PieceType.ROOK, d4, 0)
print(popcount(rook))   # 14
print(pretty(rook))
```

```python
from chessbits.bitbase import probe
from chessbits.bitboard import Color, make_square

# White king c6, white pawn d5, black king d7, white to move.
wins = probe(make_square(2, 5), make_square(3, 4), make_square(3, 6), Color.WHITE)
```

The first probe builds the whole bitbase, which takes a while; later probes
are table lookups.

```python
from chessbits.benchmark import setup_bench

commands = setup_bench("8/8/8/8/8/6k1/6p1/6K1 w - -", "64 4 5000 current movetime")
```

## Benchmark command list

`chessbits-bench` prints the UCI commands of a benchmark run, one per line.
Its arguments follow the usual `bench` order, each optional:

```
chessbits-bench [--fen FEN] [ttSize] [threads] [limit] [fenFile] [limitType] [evalType]
```

Defaults are `16 1 13 default depth mixed`. `fenFile` is `default` (the
built-in positions), `current` (the position given with `--fen`, the start
position if omitted) or a file name holding one FEN per line. A `limitType`
of `eval` makes each position's command `eval` instead of `go`. For example,
`chessbits-bench 64 1 15` lists the default positions searched to depth 15
with a 64 MB hash, and `chessbits-bench 16 1 5 default perft` lists a perft 5
on each default position. If the file cannot be read, the command prints an
error and exits with status 1.

## What it does not do

chessbits has no board or position class, no move generator, no search, no
evaluation and no UCI engine loop. `chessbits-bench` only lists the commands
for a benchmark; running them needs a separate engine.

## Tests

```
pip install .[test]
pytest
```