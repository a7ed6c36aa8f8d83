"""ワイヤ名からクライアントのパラメータ名への変換とパス解決"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z0-9]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
PATH_SEPARATOR = "."


def underscore(name: str) -> str:
    """"NextToken" のようなワイヤ名を "next_token" に変換する。"""
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


def normalize_path(path: str) -> tuple[str, ...]:
    """ドット区切りのパスをセグメントごとに正規化する。"""
    return tuple(underscore(segment) for segment in path.split(PATH_SEPARATOR))


def resolve_path(data: Any, path: tuple[str, ...]) -> Any:
    """ネストしたマッピングをたどって値を返す。見つからなければ None。"""
    value = data
    for segment in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(segment)
        if value is None:
            return None
    return value


def is_present(value: Any) -> bool:
    """トークン値が存在するか判定する。

    None と空のリスト・タプル・マッピングは存在しないものとして扱う。
    空文字列や 0、False は値として存在する。
    """
    if value is None:
        return False
    if isinstance(value, (list, tuple, Mapping)):
        return len(value) > 0
    return True
