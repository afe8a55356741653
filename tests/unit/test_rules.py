"""
単体テスト: 勝利判定のテスト
32ビットのスナップショットとマスクによるライン判定を確認
"""

import pytest
from hypothesis import given, settings, strategies as st

from src.gobblet import Color, Piece, Rules, WIN_MASKS

# 勝利ラインごとのマス（行優先のインデックス）
ROWS = [[y * 4 + x for x in range(4)] for y in range(4)]
COLUMNS = [[y * 4 + x for y in range(4)] for x in range(4)]
ANTI_DIAGONAL = [3, 6, 9, 12]
DIAGONAL = [0, 5, 10, 15]
ALL_LINES = ROWS + COLUMNS + [ANTI_DIAGONAL, DIAGONAL]


def pieces_with(indices, color):
    """指定したマスにだけ color の駒がある16マス分の駒"""
    pieces = [None] * 16
    for index in indices:
        pieces[index] = Piece(12, color)
    return pieces


class TestSnapshot:
    """スナップショットのテストクラス"""

    def test_empty_board_is_zero(self):
        assert Rules.encode_snapshot([None] * 16) == 0

    def test_first_position_is_most_significant(self):
        """(1,1) が最上位の2ビットになることを確認"""
        assert Rules.encode_snapshot(pieces_with([0], Color.BLACK)) == 0x40000000
        assert Rules.encode_snapshot(pieces_with([0], Color.WHITE)) == 0x80000000

    def test_last_position_is_least_significant(self):
        assert Rules.encode_snapshot(pieces_with([15], Color.BLACK)) == 0x1
        assert Rules.encode_snapshot(pieces_with([15], Color.WHITE)) == 0x2

    @given(st.lists(st.sampled_from([None, Color.BLACK, Color.WHITE]), min_size=16, max_size=16))
    @settings(max_examples=100)
    def test_no_position_encodes_as_11(self, colors):
        """どのマスも 11 にはならないことを確認"""
        pieces = [Piece(1, color) if color else None for color in colors]
        snapshot = Rules.encode_snapshot(pieces)

        assert snapshot < 1 << 32
        for shift in range(0, 32, 2):
            assert (snapshot >> shift) & 0b11 != 0b11


class TestWinMasks:
    """勝利マスクのテストクラス"""

    def test_ten_masks(self):
        assert len(WIN_MASKS) == 10

    @pytest.mark.parametrize("line, mask", list(zip(ALL_LINES, WIN_MASKS)))
    def test_mask_matches_line(self, line, mask):
        """各マスクがラインの黒の駒のスナップショットと一致することを確認"""
        assert Rules.encode_snapshot(pieces_with(line, Color.BLACK)) == mask
        assert Rules.encode_snapshot(pieces_with(line, Color.WHITE)) == mask << 1


class TestFindWinner:
    """勝者判定のテストクラス"""

    def test_no_winner_on_empty_board(self):
        assert Rules.find_winner(0) is None

    @pytest.mark.parametrize("line", ALL_LINES)
    @pytest.mark.parametrize("color", [Color.BLACK, Color.WHITE])
    def test_full_line_wins(self, line, color):
        """1色で揃ったラインはその色の勝ちになることを確認"""
        snapshot = Rules.encode_snapshot(pieces_with(line, color))

        assert Rules.find_winner(snapshot) == color

    @pytest.mark.parametrize("line", ALL_LINES)
    def test_mixed_line_does_not_win(self, line):
        """色が混ざったラインは勝ちにならないことを確認"""
        pieces = pieces_with(line[:3], Color.BLACK)
        pieces[line[3]] = Piece(5, Color.WHITE)

        assert Rules.find_winner(Rules.encode_snapshot(pieces)) is None

    @pytest.mark.parametrize("line", ALL_LINES)
    def test_incomplete_line_does_not_win(self, line):
        """3マスだけのラインは勝ちにならないことを確認"""
        pieces = pieces_with(line[1:], Color.WHITE)

        assert Rules.find_winner(Rules.encode_snapshot(pieces)) is None

    def test_first_line_in_mask_order_wins(self):
        """両方の色が揃っている場合はマスクの順で最初の色になることを確認"""
        pieces = pieces_with(ROWS[1], Color.WHITE)
        for index in ROWS[3]:
            pieces[index] = Piece(3, Color.BLACK)
        snapshot = Rules.encode_snapshot(pieces)

        assert Rules.find_winner(snapshot) == Color.WHITE
        assert Rules.winning_lines(snapshot) == [("row 2", Color.WHITE), ("row 4", Color.BLACK)]

    @given(
        line=st.sampled_from(ALL_LINES),
        color=st.sampled_from([Color.BLACK, Color.WHITE]),
        others=st.lists(st.sampled_from([None, Color.BLACK, Color.WHITE]), min_size=16, max_size=16),
    )
    @settings(max_examples=200)
    def test_full_line_always_has_a_winner(self, line, color, others):
        """どの配置でも1色で揃ったラインがあれば勝者がいることを確認"""
        pieces = [Piece(1, c) if c else None for c in others]
        for index in line:
            pieces[index] = Piece(12, color)
        snapshot = Rules.encode_snapshot(pieces)

        lines = Rules.winning_lines(snapshot)
        assert color in [owner for _, owner in lines]
        assert Rules.find_winner(snapshot) == lines[0][1]
