"""Bitboard representation of a chess board: constants and bit operations."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

MASK64 = (1 << 64) - 1


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Color":
        return Color(self ^ 1)


class PieceType(IntEnum):
    NO_PIECE_TYPE = 0
    ALL_PIECES = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


WHITE = Color.WHITE
BLACK = Color.BLACK

SQUARE_NB = 64

NORTH = 8
EAST = 1
SOUTH = -NORTH
WEST = -EAST
NORTH_EAST = NORTH + EAST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST
NORTH_WEST = NORTH + WEST

ALL_SQUARES = MASK64
DARK_SQUARES = 0xAA55AA55AA55AA55

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << (8 * 1)
RANK_3_BB = RANK_1_BB << (8 * 2)
RANK_4_BB = RANK_1_BB << (8 * 3)
RANK_5_BB = RANK_1_BB << (8 * 4)
RANK_6_BB = RANK_1_BB << (8 * 5)
RANK_7_BB = RANK_1_BB << (8 * 6)
RANK_8_BB = RANK_1_BB << (8 * 7)

QUEEN_SIDE = FILE_A_BB | FILE_B_BB | FILE_C_BB | FILE_D_BB
CENTER_FILES = FILE_C_BB | FILE_D_BB | FILE_E_BB | FILE_F_BB
KING_SIDE = FILE_E_BB | FILE_F_BB | FILE_G_BB | FILE_H_BB
CENTER = (FILE_D_BB | FILE_E_BB) & (RANK_4_BB | RANK_5_BB)

KING_FLANK = (
    QUEEN_SIDE ^ FILE_D_BB,
    QUEEN_SIDE,
    QUEEN_SIDE,
    CENTER_FILES,
    CENTER_FILES,
    KING_SIDE,
    KING_SIDE,
    KING_SIDE ^ FILE_E_BB,
)


def _check_square(s: int) -> None:
    if not 0 <= s < SQUARE_NB:
        raise ValueError(f"square {s} is off the board")


def make_square(file: int, rank: int) -> int:
    """Return the square index for a file and rank, both 0..7."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"file {file} / rank {rank} out of range")
    return (rank << 3) + file


def file_of(s: int) -> int:
    return s & 7


def rank_of(s: int) -> int:
    return s >> 3


def _relative_rank(color: Color, s: int) -> int:
    return rank_of(s) ^ (int(color) * 7)


def square_bb(s: int) -> int:
    """Return the bitboard holding only square s."""
    _check_square(s)
    return 1 << s


def more_than_one(b: int) -> bool:
    return bool(b & (b - 1))


def opposite_colors(s1: int, s2: int) -> bool:
    """Return whether the two squares have different colours."""
    return bool((s1 + rank_of(s1) + s2 + rank_of(s2)) & 1)


def rank_bb(rank: int) -> int:
    return RANK_1_BB << (8 * rank)


def file_bb(file: int) -> int:
    return FILE_A_BB << file


def shift(b: int, direction: int) -> int:
    """Move every square of b one step (or two straight steps) in the direction."""
    b &= MASK64
    if direction == NORTH:
        result = b << 8
    elif direction == SOUTH:
        result = b >> 8
    elif direction == NORTH + NORTH:
        result = b << 16
    elif direction == SOUTH + SOUTH:
        result = b >> 16
    elif direction == EAST:
        result = (b & ~FILE_H_BB) << 1
    elif direction == WEST:
        result = (b & ~FILE_A_BB) >> 1
    elif direction == NORTH_EAST:
        result = (b & ~FILE_H_BB) << 9
    elif direction == NORTH_WEST:
        result = (b & ~FILE_A_BB) << 7
    elif direction == SOUTH_EAST:
        result = (b & ~FILE_H_BB) >> 7
    elif direction == SOUTH_WEST:
        result = (b & ~FILE_A_BB) >> 9
    else:
        result = 0
    return result & MASK64


def pawn_attacks_bb(color: Color, b: int) -> int:
    """Squares attacked by pawns of the colour standing on the squares of b."""
    if color == WHITE:
        return shift(b, NORTH_WEST) | shift(b, NORTH_EAST)
    return shift(b, SOUTH_WEST) | shift(b, SOUTH_EAST)


def pawn_double_attacks_bb(color: Color, b: int) -> int:
    """Squares attacked twice by pawns of the colour standing on the squares of b."""
    if color == WHITE:
        return shift(b, NORTH_WEST) & shift(b, NORTH_EAST)
    return shift(b, SOUTH_WEST) & shift(b, SOUTH_EAST)


def adjacent_files_bb(s: int) -> int:
    f = file_bb(file_of(s))
    return shift(f, EAST) | shift(f, WEST)


def forward_ranks_bb(color: Color, s: int) -> int:
    """All squares on ranks in front of s, seen from the colour's side."""
    if color == WHITE:
        return ((~RANK_1_BB & MASK64) << (8 * _relative_rank(WHITE, s))) & MASK64
    return (~RANK_8_BB & MASK64) >> (8 * _relative_rank(BLACK, s))


def forward_file_bb(color: Color, s: int) -> int:
    return forward_ranks_bb(color, s) & file_bb(file_of(s))


def pawn_attack_span(color: Color, s: int) -> int:
    return forward_ranks_bb(color, s) & adjacent_files_bb(s)


def passed_pawn_span(color: Color, s: int) -> int:
    return pawn_attack_span(color, s) | forward_file_bb(color, s)


def file_distance(s1: int, s2: int) -> int:
    return abs(file_of(s1) - file_of(s2))


def rank_distance(s1: int, s2: int) -> int:
    return abs(rank_of(s1) - rank_of(s2))


def distance(s1: int, s2: int) -> int:
    """Number of king steps between two squares."""
    return max(file_distance(s1, s2), rank_distance(s1, s2))


def edge_distance(n: int) -> int:
    """Distance of a file or rank from the nearer board edge."""
    return min(n, 7 - n)


def popcount(b: int) -> int:
    return (b & MASK64).bit_count()


def lsb(b: int) -> int:
    """Least significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Most significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard has no most significant square")
    return (b & MASK64).bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return b & -b


def iter_squares(b: int) -> Iterator[int]:
    """Yield the squares of b from least to most significant."""
    b &= MASK64
    while b:
        yield lsb(b)
        b &= b - 1


def frontmost_sq(color: Color, b: int) -> int:
    """Most advanced square of b for the given colour."""
    return msb(b) if color == WHITE else lsb(b)