"""
ゴブレットのゲームエンジン - パッケージ初期化
"""

from .piece import Piece, Color, PIECE_SIZES, MIN_PIECE_SIZE, MAX_PIECE_SIZE
from .board import (
    Board,
    Stack,
    ExternalStack,
    BOARD_SIZE,
    GRID_COUNT,
    RESERVE_COUNT,
    RESERVES_PER_COLOR,
)
from .move import Move, GridPoint, ReserveRef, MoveSource
from .rules import Rules, WIN_MASKS
from .errors import (
    GobbletError,
    ReserveIntegrityError,
    IllegalPieceError,
    PieceCountError,
    ArchiveError,
    PointOutOfRangeError,
    TurnError,
    PieceDoesNotFitError,
    UnknownStackError,
    EmptySourceError,
    MoveRejectedError,
)

__all__ = [
    'Piece',
    'Color',
    'PIECE_SIZES',
    'MIN_PIECE_SIZE',
    'MAX_PIECE_SIZE',
    'Board',
    'Stack',
    'ExternalStack',
    'BOARD_SIZE',
    'GRID_COUNT',
    'RESERVE_COUNT',
    'RESERVES_PER_COLOR',
    'Move',
    'GridPoint',
    'ReserveRef',
    'MoveSource',
    'Rules',
    'WIN_MASKS',
    'GobbletError',
    'ReserveIntegrityError',
    'IllegalPieceError',
    'PieceCountError',
    'ArchiveError',
    'PointOutOfRangeError',
    'TurnError',
    'PieceDoesNotFitError',
    'UnknownStackError',
    'EmptySourceError',
    'MoveRejectedError',
]
