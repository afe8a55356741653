"""
初期盤面の設定とユーティリティ
"""

import re
from typing import Dict, List, Tuple

from .board import RESERVE_COUNT, Board, ExternalStack
from .move import GridPoint, MoveSource, ReserveRef
from .piece import Color

# 盤外スタックの初期配置（各色で1～12を1つずつ、スタック内は昇順）
DEFAULT_RESERVE_LAYOUT: Dict[Color, Tuple[Tuple[int, ...], ...]] = {
    Color.BLACK: (
        (1, 2, 3, 4),
        (5, 6, 7, 8),
        (9, 10, 11, 12),
    ),
    Color.WHITE: (
        (3, 6, 9, 12),
        (1, 4, 7, 10),
        (2, 5, 8, 11),
    ),
}

_POINT_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?$")
_RESERVE_PATTERN = re.compile(r"^r(\d+)$", re.IGNORECASE)


def create_reserves(layout: Dict[Color, Tuple[Tuple[int, ...], ...]] = None) -> List[ExternalStack]:
    """
    盤外スタックを6つ作成する
    返り値: 0～2が黒、3～5が白
    """
    layout = layout or DEFAULT_RESERVE_LAYOUT
    return [
        ExternalStack(sizes, color)
        for color in (Color.BLACK, Color.WHITE)
        for sizes in layout[color]
    ]


def new_game() -> Board:
    """空の盤面と初期配置の持ち駒で新しいゲームを作る"""
    return Board(create_reserves())


def format_point(point) -> str:
    """
    座標を文字列に変換
    例: (1, 1) -> "(1,1)"
    """
    x, y = point
    return f"({x},{y})"


def parse_point(text: str) -> GridPoint:
    """
    文字列を座標に変換
    例: "1,1" -> GridPoint(1, 1), "(4, 4)" -> GridPoint(4, 4)
    範囲のチェックは盤面が行う
    """
    match = _POINT_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Invalid point string: {text}")
    return GridPoint(int(match.group(1)), int(match.group(2)))


def parse_source(text: str) -> MoveSource:
    """
    移動元の文字列を解析
    例: "r0" -> ReserveRef(0), "2,3" -> GridPoint(2, 3)
    """
    match = _RESERVE_PATTERN.match(text.strip())
    if match:
        index = int(match.group(1))
        if index >= RESERVE_COUNT:
            raise ValueError(f"Invalid reserve index: {index}")
        return ReserveRef(index)
    return parse_point(text)
