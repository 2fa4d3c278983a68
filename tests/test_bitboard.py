import pytest

from chessbits.bitboard import (
    ALL_SQUARES,
    BLACK,
    DARK_SQUARES,
    EAST,
    FILE_A_BB,
    FILE_B_BB,
    FILE_H_BB,
    KING_FLANK,
    NORTH,
    NORTH_EAST,
    QUEEN_SIDE,
    RANK_1_BB,
    RANK_2_BB,
    RANK_8_BB,
    SOUTH,
    WHITE,
    Color,
    adjacent_files_bb,
    distance,
    edge_distance,
    file_bb,
    file_distance,
    file_of,
    forward_file_bb,
    forward_ranks_bb,
    frontmost_sq,
    iter_squares,
    least_significant_square_bb,
    lsb,
    make_square,
    more_than_one,
    msb,
    opposite_colors,
    passed_pawn_span,
    pawn_attack_span,
    pawn_attacks_bb,
    pawn_double_attacks_bb,
    popcount,
    rank_bb,
    rank_distance,
    rank_of,
    shift,
    square_bb,
)

ALL = range(64)


def sq(name):
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


def test_documented_constants():
    assert FILE_A_BB == 0x0101010101010101
    assert DARK_SQUARES == 0xAA55AA55AA55AA55
    assert popcount(ALL_SQUARES) == 64


def test_king_flank():
    assert len(KING_FLANK) == 8
    assert KING_FLANK[0] == QUEEN_SIDE ^ file_bb(3)
    assert KING_FLANK[1] == QUEEN_SIDE
    assert popcount(KING_FLANK[0]) == 24
    assert popcount(KING_FLANK[3]) == 32


def test_color_opponent_mirrors_pawn_attacks():
    e4 = square_bb(sq("e4"))
    assert pawn_attacks_bb(Color.WHITE.opponent, e4) == pawn_attacks_bb(BLACK, e4)
    assert pawn_attacks_bb(Color.BLACK.opponent, e4) == pawn_attacks_bb(WHITE, e4)


@pytest.mark.parametrize("s", ALL)
def test_square_round_trip(s):
    assert make_square(file_of(s), rank_of(s)) == s
    assert lsb(square_bb(s)) == s == msb(square_bb(s))


def test_make_square_out_of_range():
    with pytest.raises(ValueError):
        make_square(8, 0)


@pytest.mark.parametrize("s", [-1, 64])
def test_square_bb_off_board(s):
    with pytest.raises(ValueError):
        square_bb(s)


def test_rank_and_file_bb():
    assert rank_bb(0) == RANK_1_BB
    assert rank_bb(7) == RANK_8_BB
    assert file_bb(7) == FILE_H_BB
    for s in ALL:
        assert rank_bb(rank_of(s)) & file_bb(file_of(s)) == square_bb(s)


def test_more_than_one():
    assert not more_than_one(0)
    assert not more_than_one(square_bb(sq("e4")))
    assert more_than_one(square_bb(sq("e4")) | square_bb(sq("a1")))


def test_opposite_colors_matches_dark_squares():
    for s1 in ALL:
        for s2 in ALL:
            dark1 = bool(DARK_SQUARES & square_bb(s1))
            dark2 = bool(DARK_SQUARES & square_bb(s2))
            assert opposite_colors(s1, s2) == (dark1 != dark2)


def test_shift_edges():
    assert shift(RANK_1_BB, NORTH) == RANK_2_BB
    assert shift(RANK_8_BB, NORTH) == 0
    assert shift(RANK_1_BB, SOUTH) == 0
    assert shift(FILE_H_BB, EAST) == 0
    assert shift(FILE_A_BB, EAST) == FILE_B_BB
    assert shift(square_bb(sq("e4")), NORTH_EAST) == square_bb(sq("f5"))


def test_shift_unknown_direction():
    assert shift(ALL_SQUARES, 3) == 0


def test_pawn_attacks():
    e4 = square_bb(sq("e4"))
    assert pawn_attacks_bb(WHITE, e4) == square_bb(sq("d5")) | square_bb(sq("f5"))
    assert pawn_attacks_bb(BLACK, e4) == square_bb(sq("d3")) | square_bb(sq("f3"))
    assert pawn_attacks_bb(WHITE, square_bb(sq("a2"))) == square_bb(sq("b3"))


def test_pawn_double_attacks():
    pawns = square_bb(sq("d4")) | square_bb(sq("f4"))
    assert pawn_double_attacks_bb(WHITE, pawns) == square_bb(sq("e5"))
    assert pawn_double_attacks_bb(BLACK, pawns) == square_bb(sq("e3"))


def test_adjacent_files():
    assert adjacent_files_bb(sq("a5")) == FILE_B_BB
    assert adjacent_files_bb(sq("e5")) == file_bb(3) | file_bb(5)


def test_forward_ranks_documented_example():
    assert forward_ranks_bb(BLACK, sq("d3")) == RANK_1_BB | RANK_2_BB


def test_forward_ranks_symmetry():
    for s in ALL:
        front = forward_ranks_bb(WHITE, s)
        back = forward_ranks_bb(BLACK, s)
        assert front & back == 0
        assert front | back | rank_bb(rank_of(s)) == ALL_SQUARES


def test_forward_file_and_spans():
    for s in ALL:
        for c in (WHITE, BLACK):
            ff = forward_file_bb(c, s)
            assert ff & ~file_bb(file_of(s)) == 0
            assert not ff & square_bb(s)
            assert passed_pawn_span(c, s) == pawn_attack_span(c, s) | ff
            assert pawn_attack_span(c, s) & ff == 0


def test_distance():
    for s1 in ALL:
        for s2 in ALL:
            d = distance(s1, s2)
            assert d == distance(s2, s1)
            assert d == max(file_distance(s1, s2), rank_distance(s1, s2))
            assert (d == 0) == (s1 == s2)


def test_edge_distance():
    assert [edge_distance(n) for n in range(8)] == [edge_distance(7 - n) for n in range(8)]
    assert edge_distance(0) == 0


def test_lsb_msb_empty():
    with pytest.raises(ValueError):
        lsb(0)
    with pytest.raises(ValueError):
        msb(0)
    with pytest.raises(ValueError):
        least_significant_square_bb(0)


def test_iter_squares_round_trip():
    b = DARK_SQUARES
    squares = list(iter_squares(b))
    assert squares == sorted(squares)
    assert len(squares) == popcount(b)
    rebuilt = 0
    for s in squares:
        rebuilt |= square_bb(s)
    assert rebuilt == b


def test_least_significant_square_bb():
    b = square_bb(sq("c3")) | square_bb(sq("g7"))
    assert least_significant_square_bb(b) == square_bb(sq("c3"))


def test_frontmost_sq():
    b = square_bb(sq("c3")) | square_bb(sq("g7"))
    assert frontmost_sq(WHITE, b) == sq("g7")
    assert frontmost_sq(BLACK, b) == sq("c3")