"""
単体テスト: 駒と色の定義のテスト
"""

import pytest
from src.gobblet import Color, Piece, PIECE_SIZES


class TestColor:
    """色のテストクラス"""

    def test_opponent(self):
        """相手の色が正しいことを確認"""
        assert Color.BLACK.opponent == Color.WHITE
        assert Color.WHITE.opponent == Color.BLACK

    def test_snapshot_code(self):
        """スナップショット上の2ビット値を確認"""
        assert Color.BLACK.code == 0b01
        assert Color.WHITE.code == 0b10


class TestPiece:
    """駒のテストクラス"""

    def test_piece_sizes(self):
        """駒のサイズは1～12であることを確認"""
        assert PIECE_SIZES == tuple(range(1, 13))

    @pytest.mark.parametrize("size", [1, 6, 12])
    def test_legal_sizes(self, size):
        assert Piece(size, Color.BLACK).is_legal

    @pytest.mark.parametrize("size", [0, 13, -1])
    def test_illegal_sizes(self, size):
        assert not Piece(size, Color.WHITE).is_legal

    def test_piece_is_immutable(self):
        """駒は生成後に変更できないことを確認"""
        piece = Piece(3, Color.BLACK)

        with pytest.raises(AttributeError):
            piece.size = 4

    def test_covers_requires_strictly_larger(self):
        """厳密に大きい駒だけが覆えることを確認"""
        small = Piece(4, Color.BLACK)
        large = Piece(5, Color.WHITE)

        assert large.covers(small)
        assert not small.covers(large)
        assert not Piece(4, Color.WHITE).covers(small)

    def test_string_representation(self):
        assert str(Piece(12, Color.BLACK)) == "b12"
        assert str(Piece(3, Color.WHITE)) == "w3"
        assert repr(Piece(3, Color.WHITE)) == "Piece(3, WHITE)"

    def test_to_dict(self):
        assert Piece(7, Color.WHITE).to_dict() == {"size": 7, "color": "WHITE"}
