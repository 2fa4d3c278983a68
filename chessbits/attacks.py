"""Attack tables for every piece type, plus line and between-squares lookups."""

from __future__ import annotations

from functools import cache, lru_cache

from .bitboard import (
    BLACK,
    EAST,
    FILE_A_BB,
    FILE_H_BB,
    MASK64,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    RANK_1_BB,
    RANK_8_BB,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    SQUARE_NB,
    WEST,
    WHITE,
    Color,
    PieceType,
    distance,
    file_bb,
    file_of,
    make_square,
    pawn_attacks_bb,
    rank_bb,
    rank_of,
    square_bb,
)

_ROOK_DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
_BISHOP_DIRECTIONS = (NORTH_EAST, SOUTH_EAST, SOUTH_WEST, NORTH_WEST)
_KING_STEPS = (-9, -8, -7, -1, 1, 7, 8, 9)
_KNIGHT_STEPS = (-17, -15, -10, -6, 6, 10, 15, 17)

_BOARD_EDGE = "+---+---+---+---+---+---+---+---+\n"


def _check_square(s: int) -> None:
    if not 0 <= s < SQUARE_NB:
        raise ValueError(f"square {s} is off the board")


def _safe_destination(s: int, step: int) -> int:
    """Bitboard of the square one step away, or 0 if the step leaves the board."""
    to = s + step
    if 0 <= to < SQUARE_NB and distance(s, to) <= 2:
        return 1 << to
    return 0


def sliding_attack(piece_type: PieceType, s: int, occupied: int) -> int:
    """Attacks of a rook or bishop on s, computed ray by ray against occupied."""
    _check_square(s)
    if piece_type == PieceType.ROOK:
        directions = _ROOK_DIRECTIONS
    elif piece_type == PieceType.BISHOP:
        directions = _BISHOP_DIRECTIONS
    else:
        raise ValueError(f"sliding attacks need a rook or bishop, got {piece_type!r}")

    attacks = 0
    for d in directions:
        sq = s
        while _safe_destination(sq, d) and not (occupied >> sq) & 1:
            sq += d
            attacks |= 1 << sq
    return attacks


@cache
def _relevant_mask(piece_type: PieceType, s: int) -> int:
    """Squares whose occupancy can change the slider's attacks from s."""
    edges = ((RANK_1_BB | RANK_8_BB) & ~rank_bb(rank_of(s))) | (
        (FILE_A_BB | FILE_H_BB) & ~file_bb(file_of(s))
    )
    return sliding_attack(piece_type, s, 0) & ~edges & MASK64


@lru_cache(maxsize=None)
def _slider_lookup(piece_type: PieceType, s: int, relevant: int) -> int:
    return sliding_attack(piece_type, s, relevant)


def _slider_attacks(piece_type: PieceType, s: int, occupied: int) -> int:
    return _slider_lookup(piece_type, s, occupied & _relevant_mask(piece_type, s))


@cache
def _step_tables() -> tuple[tuple[int, ...], tuple[int, ...], tuple[tuple[int, ...], ...]]:
    king = tuple(
        _or_all(_safe_destination(s, step) for step in _KING_STEPS) for s in range(SQUARE_NB)
    )
    knight = tuple(
        _or_all(_safe_destination(s, step) for step in _KNIGHT_STEPS) for s in range(SQUARE_NB)
    )
    pawns = tuple(
        tuple(pawn_attacks_bb(color, 1 << s) for s in range(SQUARE_NB)) for color in (WHITE, BLACK)
    )
    return king, knight, pawns


def _or_all(bitboards) -> int:
    result = 0
    for b in bitboards:
        result |= b
    return result


def pawn_attacks(color: Color, s: int) -> int:
    """Squares attacked by a pawn of the colour standing on s."""
    _check_square(s)
    return _step_tables()[2][Color(color)][s]


def pseudo_attacks(piece_type: PieceType, s: int) -> int:
    """Attacks of a non-pawn piece on s over an empty board."""
    _check_square(s)
    king, knight, _ = _step_tables()
    if piece_type == PieceType.KING:
        return king[s]
    if piece_type == PieceType.KNIGHT:
        return knight[s]
    if piece_type in (PieceType.BISHOP, PieceType.ROOK):
        return _slider_attacks(piece_type, s, 0)
    if piece_type == PieceType.QUEEN:
        return _slider_attacks(PieceType.BISHOP, s, 0) | _slider_attacks(PieceType.ROOK, s, 0)
    raise ValueError(f"no pseudo attacks for piece type {piece_type!r}")


def attacks_bb(piece_type: PieceType, s: int, occupied: int = 0) -> int:
    """Attacks of a non-pawn piece on s; sliders stop at the first occupied square."""
    _check_square(s)
    if piece_type in (PieceType.BISHOP, PieceType.ROOK):
        return _slider_attacks(piece_type, s, occupied)
    if piece_type == PieceType.QUEEN:
        return _slider_attacks(PieceType.BISHOP, s, occupied) | _slider_attacks(
            PieceType.ROOK, s, occupied
        )
    if piece_type in (PieceType.KING, PieceType.KNIGHT):
        return pseudo_attacks(piece_type, s)
    raise ValueError(f"no attacks for piece type {piece_type!r}")


@cache
def _line_tables() -> tuple[tuple[tuple[int, ...], ...], tuple[tuple[int, ...], ...]]:
    line = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
    between = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
    for s1 in range(SQUARE_NB):
        for pt in (PieceType.BISHOP, PieceType.ROOK):
            pseudo = attacks_bb(pt, s1, 0)
            for s2 in range(SQUARE_NB):
                if (pseudo >> s2) & 1:
                    line[s1][s2] = (
                        (attacks_bb(pt, s1, 0) & attacks_bb(pt, s2, 0)) | (1 << s1) | (1 << s2)
                    )
                    between[s1][s2] = attacks_bb(pt, s1, 1 << s2) & attacks_bb(pt, s2, 1 << s1)
                between[s1][s2] |= 1 << s2
    return tuple(map(tuple, line)), tuple(map(tuple, between))


def line_bb(s1: int, s2: int) -> int:
    """The whole edge-to-edge line through both squares, or 0 if they are not aligned."""
    _check_square(s1)
    _check_square(s2)
    return _line_tables()[0][s1][s2]


def between_bb(s1: int, s2: int) -> int:
    """Squares from s1 (excluded) to s2 (included); just s2 if they are not aligned."""
    _check_square(s1)
    _check_square(s2)
    return _line_tables()[1][s1][s2]


def aligned(s1: int, s2: int, s3: int) -> bool:
    """Whether the three squares lie on one rank, file or diagonal."""
    return bool(line_bb(s1, s2) & square_bb(s3))


def pretty(b: int) -> str:
    """ASCII drawing of a bitboard, rank 8 at the top."""
    text = _BOARD_EDGE
    for r in range(7, -1, -1):
        for f in range(8):
            text += "| X " if (b >> make_square(f, r)) & 1 else "|   "
        text += f"| {1 + r}\n" + _BOARD_EDGE
    text += "  a   b   c   d   e   f   g   h\n"
    return text