# backend/notihub/utils/config.py

"""
環境変数読み取り用のユーティリティ。

Notihub の設定値はすべて任意で、未設定（空文字を含む）ならデフォルトを使う。
"""

import os


def get_env(name: str, default: str) -> str:
    """
    環境変数を取得し、未設定なら default を返す。

    前後の空白は取り除き、空白だけの値も未設定として扱う。
    """
    value = os.getenv(name, "").strip()
    return value or default
