"""
ゴブレットの盤面を管理するモジュール
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import (
    ArchiveError,
    EmptySourceError,
    GobbletError,
    IllegalPieceError,
    MoveRejectedError,
    PieceCountError,
    PieceDoesNotFitError,
    PointOutOfRangeError,
    ReserveIntegrityError,
    TurnError,
    UnknownStackError,
)
from .move import GridPoint, Move, ReserveRef
from .piece import PIECE_SIZES, Color, Piece
from .rules import Rules

logger = logging.getLogger(__name__)

# 盤面サイズ（4x4）
BOARD_SIZE = 4
GRID_COUNT = BOARD_SIZE * BOARD_SIZE
# 盤外スタックの数（0～2: 黒、3～5: 白）
RESERVES_PER_COLOR = 3
RESERVE_COUNT = RESERVES_PER_COLOR * 2


class Stack:
    """一つのマスに積まれた駒を管理するクラス

    見えるのも動かせるのも一番上の駒だけ。駒は一番上の駒より厳密に大きい
    場合にのみ上に乗せられる。
    """

    def __init__(self):
        self.pieces: List[Piece] = []  # 下から上への駒のリスト

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> 'Stack':
        """駒のリスト（下から上）からスタックを作る。乗せ方は検証される"""
        stack = cls()
        for piece in pieces:
            stack.move_in(piece)
        return stack

    def __len__(self):
        return len(self.pieces)

    def __eq__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self.pieces == other.pieces

    def is_empty(self) -> bool:
        return len(self.pieces) == 0

    @property
    def current(self) -> Optional[Piece]:
        """一番上の駒（空ならNone）"""
        if self.is_empty():
            return None
        return self.pieces[-1]

    @property
    def all(self) -> Tuple[Piece, ...]:
        """全ての駒（下から上）"""
        return tuple(self.pieces)

    def can_accept(self, piece: Piece) -> bool:
        """piece をこのスタックに乗せられるか"""
        top = self.current
        return top is None or piece.covers(top)

    def check_fit(self, piece: Piece) -> None:
        """piece を乗せられなければ PieceDoesNotFitError を送出"""
        if not self.can_accept(piece):
            raise PieceDoesNotFitError(
                "The piece cannot fit in the stack!",
                context={"piece": str(piece), "top": str(self.current)},
            )

    def move_in(self, piece: Piece) -> 'Stack':
        """
        スタックの一番上に駒を乗せる
        返り値: このスタック（連鎖呼び出し用）
        """
        self.check_fit(piece)
        self.pieces.append(piece)
        return self

    def move_out(self) -> Optional[Piece]:
        """一番上の駒を取り除いて返す（空ならNone）"""
        if self.is_empty():
            return None
        return self.pieces.pop()

    def __str__(self):
        if self.is_empty():
            return "   "
        return "/".join(str(piece) for piece in self.pieces)

    def __repr__(self):
        return f"{type(self).__name__}({self.pieces!r})"

    def to_dict(self) -> List[dict]:
        """スタックを辞書形式に変換"""
        return [piece.to_dict() for piece in self.pieces]


class ExternalStack(Stack):
    """盤外スタック（持ち駒の山）

    生成時に1色の駒をサイズ順に積む。サイズは昇順でなければならない。
    """

    def __init__(self, sizes: Sequence[int], color: Color):
        super().__init__()
        self.color = color
        for size in sizes:
            self.move_in(Piece(size, color))

    def __repr__(self):
        sizes = [piece.size for piece in self.pieces]
        return f"ExternalStack({sizes!r}, {self.color.name})"


class Board:
    """ゴブレットのゲームボードを表すクラス

    16マスのスタック（行優先、(x, y) は index (y-1)*4 + (x-1)）と
    6つの盤外スタック、手番を持つ。
    """

    def __init__(
        self,
        reserves: Sequence[ExternalStack],
        archived_grid: Optional[Sequence[Stack]] = None,
        turn_to: Optional[Color] = None,
    ):
        if archived_grid is not None:
            if len(archived_grid) != GRID_COUNT:
                raise ArchiveError(
                    f"An archived board must have {GRID_COUNT} grids.",
                    context={"grids": len(archived_grid)},
                )
            if len({id(stack) for stack in archived_grid}) != GRID_COUNT:
                raise ArchiveError("Each grid of an archived board must be a separate stack.")
            reserve_ids = {id(stack) for stack in reserves}
            if any(id(stack) in reserve_ids for stack in archived_grid):
                raise ArchiveError("An external stack cannot be used as a grid.")
            self.stacks: List[Stack] = list(archived_grid)
        else:
            # 空の盤面を初期化
            self.stacks = [Stack() for _ in range(GRID_COUNT)]

        self._turn = turn_to if turn_to is not None else Color.BLACK
        if not isinstance(self._turn, Color):
            raise ArchiveError(f"Invalid turn: {turn_to!r}")

        self._check_reserves(reserves, self.stacks)
        self._reserves: List[ExternalStack] = list(reserves)

    # =========================================================================
    # 参照
    # =========================================================================

    @property
    def grid(self) -> Tuple[Stack, ...]:
        """16マスのスタック（行優先）"""
        return tuple(self.stacks)

    @property
    def turn(self) -> Color:
        """手番の色"""
        return self._turn

    @property
    def reserves(self) -> Tuple[ExternalStack, ...]:
        """全ての盤外スタック（0～2: 黒、3～5: 白）"""
        return tuple(self._reserves)

    @property
    def black_reserves(self) -> Tuple[ExternalStack, ...]:
        return tuple(self._reserves[:RESERVES_PER_COLOR])

    @property
    def white_reserves(self) -> Tuple[ExternalStack, ...]:
        return tuple(self._reserves[RESERVES_PER_COLOR:])

    def reserves_of(self, color: Color) -> Tuple[ExternalStack, ...]:
        """指定した色の盤外スタック"""
        return self.black_reserves if color == Color.BLACK else self.white_reserves

    @property
    def snapshot(self) -> List[Optional[Piece]]:
        """各マスの一番上の駒（空マスはNone）"""
        return [stack.current for stack in self.stacks]

    @property
    def hex_snapshot(self) -> int:
        """
        盤面を32ビットで表した値
        1マス2ビット: 00 - 空、01 - 黒、10 - 白（11は存在しない）
        """
        return Rules.encode_snapshot(self.snapshot)

    def get_stack(self, point) -> Stack:
        """指定座標のスタックを取得"""
        return self._find_grid_by_point(point)

    def get_top_piece(self, point) -> Optional[Piece]:
        """指定座標の一番上の駒を取得"""
        return self._find_grid_by_point(point).current

    def reserve_index(self, stack: Stack) -> int:
        """盤外スタックのインデックスを返す（この盤面のものでなければ例外）"""
        for index, reserve in enumerate(self._reserves):
            if reserve is stack:
                return index
        raise UnknownStackError("Cannot find the stack.")

    # =========================================================================
    # 手の適用
    # =========================================================================

    def move(self, source, to) -> 'Board':
        """
        駒を動かして手番を交代する
        source: 盤上の駒なら GridPoint（または (x, y)）、
                持ち駒なら ReserveRef かこの盤面の ExternalStack
        to: 移動先の座標
        返り値: 更新された盤面

        失敗した場合は MoveRejectedError を送出し、盤面は変更されない。
        """
        try:
            match source:
                case ReserveRef(index=index):
                    self.move_piece_from_reserve(index, to)
                case Stack():
                    self.move_piece_from_reserve(self.reserve_index(source), to)
                case GridPoint() | (int(), int()):
                    self.move_piece_on_grid(GridPoint(*source), to)
                case _:
                    raise TypeError(f"Unsupported move source: {source!r}")
        except GobbletError as error:
            logger.debug("Rejected move %s -> %s: %s", source, to, error)
            raise MoveRejectedError(
                "CannotMovePiece",
                context={"from": str(source), "to": str(to)},
            ) from error

        logger.debug("%s moved %s -> %s", self._turn.name, source, to)
        self._turn = self._turn.opponent
        return self

    def apply(self, move: Move) -> 'Board':
        """Move を適用する"""
        return self.move(move.source, move.to)

    def move_piece_from_reserve(self, index: int, to) -> 'Board':
        """
        盤外スタックの駒を盤上に打つ
        手番は交代しない（交代は move が行う）
        """
        if not 0 <= index < len(self._reserves):
            raise UnknownStackError("Cannot find the stack.", context={"index": index})
        reserve = self._reserves[index]

        target = self._find_grid_by_point(to)

        piece = reserve.current
        if piece is None:
            raise EmptySourceError(
                "There's no piece left in the stack.", context={"index": index}
            )
        if piece.color != self._turn:
            raise TurnError(f"It's not {piece.color.name}'s turn yet.")

        # 乗せられることを確認してから取り出す
        target.check_fit(piece)
        target.move_in(reserve.move_out())
        return self

    def move_piece_on_grid(self, from_point, to) -> 'Board':
        """
        盤上の駒を別のマスに動かす
        手番は交代しない（交代は move が行う）
        """
        target = self._find_grid_by_point(to)
        grid = self._find_grid_by_point(from_point)

        piece = grid.current
        if piece is None:
            x, y = from_point
            raise EmptySourceError(f"There's no piece at the grid ({x}, {y}).")
        if piece.color != self._turn:
            raise TurnError("Cannot move opponent's piece.")

        # 乗せられることを確認してから取り出す
        target.check_fit(piece)
        target.move_in(grid.move_out())
        return self

    # =========================================================================
    # 勝利判定
    # =========================================================================

    def check_for_winner(self) -> Optional[Color]:
        """勝者の色を返す（いなければNone）"""
        winner = Rules.find_winner(self.hex_snapshot)
        if winner is not None:
            logger.info("%s wins", winner.name)
        return winner

    def is_game_over(self) -> Tuple[bool, Optional[Color]]:
        """(ゲーム終了か, 勝者) を返す"""
        winner = self.check_for_winner()
        return winner is not None, winner

    # =========================================================================
    # 補助
    # =========================================================================

    def _find_grid_by_point(self, point) -> Stack:
        x, y = point
        if not (isinstance(x, int) and isinstance(y, int)):
            raise PointOutOfRangeError(f"The point ({x},{y}) is not a grid of board!")
        if not (1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE):
            raise PointOutOfRangeError(f"The point ({x},{y}) is out of range of board!")
        return self.stacks[(y - 1) * BOARD_SIZE + (x - 1)]

    @staticmethod
    def _check_reserves(reserves: Sequence[Stack], grid: Sequence[Stack]) -> bool:
        """
        盤外スタックの構成を検証する
        各色の3つのスタック（と盤上のその色の駒）に1～12が1つずつあること
        """
        if len(reserves) != RESERVE_COUNT:
            raise ReserveIntegrityError(
                f"Expected {RESERVE_COUNT} external stacks.",
                context={"stacks": len(reserves)},
            )

        for group, color in enumerate((Color.BLACK, Color.WHITE)):
            chunk = reserves[group * RESERVES_PER_COLOR:(group + 1) * RESERVES_PER_COLOR]
            pieces = [piece for stack in chunk for piece in stack.all]

            for piece in pieces:
                if not piece.is_legal or piece.color != color:
                    raise IllegalPieceError(
                        f"Found an illegal piece {piece!r} from external stacks of {color.name}."
                    )

            # 盤上に出ている駒も数える
            on_board = [piece for stack in grid for piece in stack.all if piece.color == color]
            for piece in on_board:
                if not piece.is_legal:
                    raise IllegalPieceError(f"Found an illegal piece {piece!r} on the board.")
            pieces.extend(on_board)

            count = len(pieces)
            if count < len(PIECE_SIZES):
                raise PieceCountError(
                    f"Missing {len(PIECE_SIZES) - count} piece(s) in external stacks of {color.name}."
                )
            if count > len(PIECE_SIZES):
                raise PieceCountError(
                    f"Found {count - len(PIECE_SIZES)} extra piece(s) in external stacks of {color.name}."
                )

            duplicated = sorted(
                size for size, n in Counter(piece.size for piece in pieces).items() if n > 1
            )
            if duplicated:
                raise PieceCountError(
                    f"Found duplicated piece(s) in external stacks of {color.name}.",
                    context={"sizes": duplicated},
                )
        return True

    def copy(self) -> 'Board':
        """盤面のコピーを作成"""
        grid = [Stack.from_pieces(stack.all) for stack in self.stacks]
        reserves = [
            ExternalStack([piece.size for piece in stack.all], color)
            for color in (Color.BLACK, Color.WHITE)
            for stack in self.reserves_of(color)
        ]
        return Board(reserves, archived_grid=grid, turn_to=self._turn)

    def __repr__(self):
        return f"Board(turn={self._turn.name}, snapshot={self.hex_snapshot:#010x})"

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換"""
        winner = Rules.find_winner(self.hex_snapshot)
        return {
            "grid": [stack.to_dict() for stack in self.stacks],
            "turn": self._turn.name,
            "reserves": [stack.to_dict() for stack in self._reserves],
            "snapshot": self.hex_snapshot,
            "winner": winner.name if winner else None,
        }
