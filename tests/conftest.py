"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """初期配置の持ち駒と空の盤面を提供するフィクスチャ"""
    from src.gobblet.initial_setup import new_game
    return new_game()


@pytest.fixture
def reserves():
    """初期配置の盤外スタック6つを提供するフィクスチャ"""
    from src.gobblet.initial_setup import create_reserves
    return create_reserves()

