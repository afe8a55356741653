"""
ゴブレットの勝利判定を行うモジュール

盤面は32ビットのスナップショットで表す。(1,1) から行優先で16マスを並べ、
1マスにつき2ビット（00: 空、01: 黒、10: 白）を上位ビットから詰める。
"""

from typing import Iterable, List, Optional, Tuple

from .piece import Color, Piece

# 勝利ラインのマスク（黒の2ビット値 01 の位置）。白は1ビット左にずらして使う
# 判定順: 1～4行目、1～4列目、斜め（(4,1)-(1,4)）、斜め（(1,1)-(4,4)）
WIN_MASKS: Tuple[int, ...] = (
    0x55000000,
    0x00550000,
    0x00005500,
    0x00000055,
    0x40404040,
    0x10101010,
    0x04040404,
    0x01010101,
    0x01041040,
    0x40100401,
)

# マスクに対応するラインの名前
WIN_LINE_NAMES: Tuple[str, ...] = (
    "row 1", "row 2", "row 3", "row 4",
    "column 1", "column 2", "column 3", "column 4",
    "anti-diagonal", "diagonal",
)


class Rules:
    """ゴブレットの勝利判定をまとめたクラス"""

    @staticmethod
    def encode_snapshot(pieces: Iterable[Optional[Piece]]) -> int:
        """
        各マスの一番上の駒からスナップショットを作る
        pieces: 行優先で並べた16マス分の駒（空マスはNone）
        """
        snapshot = 0
        for piece in pieces:
            snapshot <<= 2
            if piece is not None:
                snapshot += piece.color.code
        return snapshot

    @staticmethod
    def line_owner(mask: int, snapshot: int) -> Optional[Color]:
        """mask のラインを1色で揃えている色を返す"""
        if mask & snapshot == mask:
            return Color.BLACK
        if (mask << 1) & snapshot == mask << 1:
            return Color.WHITE
        return None

    @staticmethod
    def find_winner(snapshot: int) -> Optional[Color]:
        """
        勝者を返す（いなければNone）
        複数のラインが揃っている場合は WIN_MASKS の順で最初に見つかった色
        """
        for mask in WIN_MASKS:
            owner = Rules.line_owner(mask, snapshot)
            if owner is not None:
                return owner
        return None

    @staticmethod
    def winning_lines(snapshot: int) -> List[Tuple[str, Color]]:
        """揃っている全てのラインを (ライン名, 色) のリストで返す"""
        lines = []
        for name, mask in zip(WIN_LINE_NAMES, WIN_MASKS):
            owner = Rules.line_owner(mask, snapshot)
            if owner is not None:
                lines.append((name, owner))
        return lines
