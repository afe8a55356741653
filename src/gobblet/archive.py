"""
対局の保存と再開（メモリ上のスナップショット）

BoardData は pydantic モデルなので model_dump() / model_validate() で
辞書とやり取りできる。ファイルなどへの永続化は扱わない。
"""

from typing import List

from pydantic import BaseModel, Field

from .board import GRID_COUNT, RESERVE_COUNT, Board, ExternalStack, Stack
from .piece import Color, Piece


class PieceData(BaseModel):
    size: int
    color: Color

    def to_piece(self) -> Piece:
        return Piece(self.size, self.color)


class BoardData(BaseModel):
    """保存された対局

    grid: 16マスのスタック（行優先、各スタックは下から上）
    reserves: 6つの盤外スタック（0～2: 黒、3～5: 白）
    """
    grid: List[List[PieceData]] = Field(min_length=GRID_COUNT, max_length=GRID_COUNT)
    turn: Color = Color.BLACK
    reserves: List[List[PieceData]] = Field(min_length=RESERVE_COUNT, max_length=RESERVE_COUNT)


def _dump_stack(stack: Stack) -> List[PieceData]:
    return [PieceData(size=piece.size, color=piece.color) for piece in stack.all]


def archive_board(board: Board) -> BoardData:
    """盤面を BoardData に保存する"""
    return BoardData(
        grid=[_dump_stack(stack) for stack in board.grid],
        turn=board.turn,
        reserves=[_dump_stack(stack) for stack in board.reserves],
    )


def restore_board(data: BoardData) -> Board:
    """
    BoardData から盤面を再構築する
    スタックの乗せ方と持ち駒の構成は通常の構築と同じく検証される
    """
    grid = [Stack.from_pieces(piece.to_piece() for piece in stack) for stack in data.grid]
    reserves = []
    for index, stack in enumerate(data.reserves):
        color = Color.BLACK if index < RESERVE_COUNT // 2 else Color.WHITE
        reserve = ExternalStack([], color)
        for piece in stack:
            reserve.move_in(piece.to_piece())
        reserves.append(reserve)
    return Board(reserves, archived_grid=grid, turn_to=data.turn)

