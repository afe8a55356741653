"""
ゴブレットの駒と色を定義するモジュール
"""

from enum import Enum
from typing import NamedTuple

# 駒のサイズの範囲（各色に1～12が1つずつ）
MIN_PIECE_SIZE = 1
MAX_PIECE_SIZE = 12
PIECE_SIZES = tuple(range(MIN_PIECE_SIZE, MAX_PIECE_SIZE + 1))


class Color(Enum):
    """駒の色"""
    BLACK = 0  # 先手（黒）
    WHITE = 1  # 後手（白）

    @property
    def opponent(self):
        """相手の色を返す"""
        return Color.WHITE if self == Color.BLACK else Color.BLACK

    @property
    def code(self) -> int:
        """スナップショット上の2ビット値（黒=01、白=10）"""
        return self.value + 1


class Piece(NamedTuple):
    """ゴブレットの駒（生成後は変更不可）"""
    size: int
    color: Color

    def __str__(self):
        """駒の文字列表現（例: 'b12', 'w3'）"""
        prefix = 'b' if self.color == Color.BLACK else 'w'
        return f"{prefix}{self.size}"

    def __repr__(self):
        return f"Piece({self.size}, {self.color.name})"

    @property
    def is_legal(self) -> bool:
        """サイズが1～12の範囲内か"""
        return isinstance(self.size, int) and MIN_PIECE_SIZE <= self.size <= MAX_PIECE_SIZE

    def covers(self, other: "Piece") -> bool:
        """この駒が other の上に乗れるか（厳密に大きい場合のみ）"""
        return self.size > other.size

    def to_dict(self) -> dict:
        return {"size": self.size, "color": self.color.name}
