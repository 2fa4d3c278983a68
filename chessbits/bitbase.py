"""King and pawn versus king endgame bitbase, built by retrograde iteration."""

from __future__ import annotations

from enum import IntEnum
from functools import cache

from .attacks import pawn_attacks, pseudo_attacks
from .bitboard import BLACK, WHITE, Color, PieceType, distance, file_of, iter_squares, rank_of

# side to move * 24 pawn squares * white king * black king
MAX_INDEX = 2 * 24 * 64 * 64

_RANK_2 = 1
_RANK_7 = 6
_FILE_D = 3


class _Result(IntEnum):
    INVALID = 0
    UNKNOWN = 1
    DRAW = 2
    WIN = 4


def _index(stm: int, bksq: int, wksq: int, psq: int) -> int:
    return wksq | (bksq << 6) | (stm << 12) | ((psq & 7) << 13) | ((_RANK_7 - (psq >> 3)) << 15)


def bitbase_index(stm: Color, bksq: int, wksq: int, psq: int) -> int:
    """Index of a position: kings in bits 0-11, side in bit 12, pawn file and rank above."""
    for s in (bksq, wksq, psq):
        if not 0 <= s < 64:
            raise ValueError(f"square {s} is off the board")
    if file_of(psq) > _FILE_D:
        raise ValueError("pawn must be on files a to d")
    if not _RANK_2 <= rank_of(psq) <= _RANK_7:
        raise ValueError("pawn must be on ranks 2 to 7")
    return _index(int(Color(stm)), bksq, wksq, psq)


def _decode(idx: int) -> tuple[int, int, int, int]:
    wk = idx & 0x3F
    bk = (idx >> 6) & 0x3F
    stm = (idx >> 12) & 1
    psq = (((idx >> 15) & 7) ^ 0) 
    psq = ((_RANK_7 - psq) << 3) + ((idx >> 13) & 3)
    return wk, bk, stm, psq


def _initial_result(idx: int, king_bb: list[int], pawn_bb: list[int]) -> int:
    wk, bk, stm, psq = _decode(idx)

    # Two pieces on one square, or a king that could be captured
    if (
        distance(wk, bk) <= 1
        or wk == psq
        or bk == psq
        or (stm == WHITE and (pawn_bb[psq] >> bk) & 1)
    ):
        return _Result.INVALID

    # The pawn promotes without being captured
    up = psq + 8
    if (
        stm == WHITE
        and rank_of(psq) == _RANK_7
        and wk != up
        and (distance(bk, up) > 1 or distance(wk, up) == 1)
    ):
        return _Result.WIN

    # Stalemate, or the black king takes the pawn
    if stm == BLACK and (
        not (king_bb[bk] & ~(king_bb[wk] | pawn_bb[psq]))
        or (king_bb[bk] & ~king_bb[wk] & (1 << psq))
    ):
        return _Result.DRAW

    return _Result.UNKNOWN


def _classify(idx: int, db: bytearray, king_to: list[tuple[int, ...]]) -> int:
    wk, bk, stm, psq = _decode(idx)
    r = 0
    if stm == WHITE:
        good, bad = _Result.WIN, _Result.DRAW
        for to in king_to[wk]:
            r |= db[_index(BLACK, bk, to, psq)]
        rank = rank_of(psq)
        if rank < _RANK_7:
            r |= db[_index(BLACK, bk, wk, psq + 8)]
        if rank == _RANK_2 and psq + 8 != wk and psq + 8 != bk:
            r |= db[_index(BLACK, bk, wk, psq + 16)]
    else:
        good, bad = _Result.DRAW, _Result.WIN
        for to in king_to[bk]:
            r |= db[_index(WHITE, to, wk, psq)]

    if r & good:
        return good
    if r & _Result.UNKNOWN:
        return _Result.UNKNOWN
    return bad


@cache
def _generate() -> bytes:
    """Return one byte per index, 1 where the stronger side wins."""
    king_bb = [pseudo_attacks(PieceType.KING, s) for s in range(64)]
    king_to = [tuple(iter_squares(b)) for b in king_bb]
    pawn_bb = [pawn_attacks(WHITE, s) for s in range(64)]

    db = bytearray(_initial_result(idx, king_bb, pawn_bb) for idx in range(MAX_INDEX))

    # Keep classifying unknown positions until a full pass changes nothing
    unknown = [idx for idx in range(MAX_INDEX) if db[idx] == _Result.UNKNOWN]
    changed = True
    while changed:
        changed = False
        remaining = []
        for idx in unknown:
            result = _classify(idx, db, king_to)
            if result == _Result.UNKNOWN:
                remaining.append(idx)
            else:
                db[idx] = result
                changed = True
        unknown = remaining

    return bytes(1 if value == _Result.WIN else 0 for value in db)


class KPKBitbase:
    """Win/draw table for king and pawn against king, white holding the pawn."""

    def __init__(self) -> None:
        self._bits = _generate()

    def __len__(self) -> int:
        return len(self._bits)

    def probe(self, wksq: int, wpsq: int, bksq: int, stm: Color) -> bool:
        """Whether white wins; the pawn must stand on files a to d."""
        return bool(self._bits[bitbase_index(stm, bksq, wksq, wpsq)])


@cache
def _default() -> KPKBitbase:
    return KPKBitbase()


def probe(wksq: int, wpsq: int, bksq: int, stm: Color) -> bool:
    """Probe the shared bitbase, building it on first use."""
    return _default().probe(wksq, wpsq, bksq, stm)