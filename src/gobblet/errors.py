"""
ゴブレットのエンジンが送出する例外の定義

全ての例外は GobbletError を継承する。Board.move で失敗した手は
MoveRejectedError に包まれ、元の例外は __cause__ から参照できる。

使用例:
    try:
        board.move(ReserveRef(0), GridPoint(1, 1))
    except MoveRejectedError as e:
        if isinstance(e.__cause__, PieceDoesNotFitError):
            ...
"""

from typing import Any, Dict, Optional

__all__ = [
    "GobbletError",
    "ReserveIntegrityError",
    "IllegalPieceError",
    "PieceCountError",
    "ArchiveError",
    "PointOutOfRangeError",
    "TurnError",
    "PieceDoesNotFitError",
    "UnknownStackError",
    "EmptySourceError",
    "MoveRejectedError",
]


class GobbletError(Exception):
    """エンジンの例外の基底クラス

    Attributes:
        code: 分類用のエラーコード
        message: 人が読むためのメッセージ
        context: デバッグ用の追加情報
    """
    code: str = "GOBBLET_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# 盤面の構築エラー
# =============================================================================


class ReserveIntegrityError(GobbletError):
    """持ち駒（盤外スタック）の構成が不正"""
    code: str = "RESERVE_INTEGRITY"


class IllegalPieceError(ReserveIntegrityError):
    """サイズが1～12の範囲外、または色が所属グループと一致しない駒"""
    code: str = "ILLEGAL_PIECE"


class PieceCountError(ReserveIntegrityError):
    """駒の数が足りない、多すぎる、またはサイズが重複している"""
    code: str = "PIECE_COUNT"


class ArchiveError(GobbletError):
    """保存された盤面の形が不正"""
    code: str = "ARCHIVE"


# =============================================================================
# 手の検証エラー
# =============================================================================


class PointOutOfRangeError(GobbletError, ValueError):
    """盤面の範囲外の座標"""
    code: str = "POINT_OUT_OF_RANGE"


class TurnError(GobbletError):
    """手番ではない色の駒を動かそうとした"""
    code: str = "TURN"


class PieceDoesNotFitError(GobbletError):
    """移動先の一番上の駒が同じサイズ以上"""
    code: str = "PIECE_DOES_NOT_FIT"


class UnknownStackError(GobbletError, LookupError):
    """この盤面に属さない盤外スタック"""
    code: str = "UNKNOWN_STACK"


class EmptySourceError(GobbletError, LookupError):
    """移動元に駒がない"""
    code: str = "EMPTY_SOURCE"


class MoveRejectedError(GobbletError):
    """Board.move が手を受け付けなかった

    具体的な理由は __cause__ に入っている。
    """
    code: str = "MOVE_REJECTED"

    @property
    def reason(self) -> Optional[BaseException]:
        return self.__cause__
