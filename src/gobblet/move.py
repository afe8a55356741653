"""
ゴブレットの手（Move）を表現するモジュール

移動元は盤上の座標（GridPoint）か盤外スタックの参照（ReserveRef）のどちらか。
移動先は常に盤上の座標。
"""

from typing import NamedTuple, Union


class GridPoint(NamedTuple):
    """盤上の座標 (1,1) ～ (4,4)"""
    x: int
    y: int

    def __str__(self):
        return f"({self.x},{self.y})"


class ReserveRef(NamedTuple):
    """盤外スタックの参照（0～2: 黒、3～5: 白）"""
    index: int

    def __str__(self):
        return f"r{self.index}"


MoveSource = Union[GridPoint, ReserveRef]


class Move:
    """ゴブレットの一手を表すクラス"""

    def __init__(self, source: MoveSource, to: GridPoint):
        # 移動元（ReserveRef 以外は座標として扱う）
        self.source = source if isinstance(source, ReserveRef) else GridPoint(*source)
        self.to = GridPoint(*to)  # 移動先

    @property
    def from_reserve(self) -> bool:
        """盤外スタックから打つ手か"""
        return isinstance(self.source, ReserveRef)

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.source == other.source and self.to == other.to

    def __hash__(self):
        return hash((self.source, self.to))

    def __str__(self):
        return f"{self.source} -> {self.to}"

    def __repr__(self):
        return f"Move(source={self.source!r}, to={self.to!r})"

    def to_dict(self) -> dict:
        """手を辞書形式に変換"""
        if self.from_reserve:
            source = {"reserve": self.source.index}
        else:
            source = {"x": self.source.x, "y": self.source.y}
        return {
            "from": source,
            "to": {"x": self.to.x, "y": self.to.y},
        }

    @staticmethod
    def from_dict(data: dict) -> 'Move':
        """辞書形式から手を復元"""
        source_data = data["from"]
        if "reserve" in source_data:
            source = ReserveRef(int(source_data["reserve"]))
        else:
            source = GridPoint(int(source_data["x"]), int(source_data["y"]))
        to = GridPoint(int(data["to"]["x"]), int(data["to"]["y"]))
        return Move(source, to)

    @staticmethod
    def create_grid_move(from_point, to_point) -> 'Move':
        """盤上の駒を動かす手を作成"""
        return Move(GridPoint(*from_point), GridPoint(*to_point))

    @staticmethod
    def create_reserve_move(index: int, to_point) -> 'Move':
        """盤外スタックの駒を打つ手を作成"""
        return Move(ReserveRef(index), GridPoint(*to_point))
