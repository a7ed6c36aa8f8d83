"""Pager / NullPager 実装"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import PagingRule
from .naming import is_present, normalize_path, resolve_path, underscore


class BasePager(ABC):
    """レスポンスデータからページング状態を評価する抽象基底クラス。

    実装は状態を持たず、複数のページングチェーンで共有できる。
    """

    @abstractmethod
    def tokens(self, data: Any) -> dict[str, Any]:
        """次のリクエストに設定するトークンをパラメータ名で返す。"""
        ...

    @abstractmethod
    def truncated(self, data: Any) -> bool | None:
        """明示的な続きありフラグを返す。判断できなければ None。"""
        ...

    def last_page(self, data: Any) -> bool:
        """data が最終ページなら True を返す。"""
        truncated = self.truncated(data)
        if truncated is None:
            return not self.tokens(data)
        return not truncated


class Pager(BasePager):
    """PagingRule に従ってトークンと最終ページ判定を行う。"""

    def __init__(self, rule: PagingRule) -> None:
        self._rule = rule
        self._params = tuple(underscore(name) for name in rule.input_tokens)
        self._paths = tuple(normalize_path(path) for path in rule.output_tokens)
        self._more_results = (
            normalize_path(rule.more_results) if rule.more_results else None
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Pager:
        return cls(PagingRule.from_dict(data))

    @property
    def rule(self) -> PagingRule:
        return self._rule

    def tokens(self, data: Any) -> dict[str, Any]:
        # 出力トークンはいずれか一つでも存在すれば次ページありとなる
        tokens: dict[str, Any] = {}
        for param, path in zip(self._params, self._paths):
            value = resolve_path(data, path)
            if is_present(value):
                tokens[param] = value
        return tokens

    def truncated(self, data: Any) -> bool | None:
        if self._more_results is None:
            return None
        value = resolve_path(data, self._more_results)
        # 真偽値以外（"false" などの文字列）はフラグとして扱わない
        if not isinstance(value, bool):
            return None
        return value

    def __repr__(self) -> str:
        return f"Pager({self._rule!r})"


class NullPager(BasePager):
    """ページング定義を持たないオペレーション用。常に最終ページ。"""

    def tokens(self, data: Any) -> dict[str, Any]:
        return {}

    def truncated(self, data: Any) -> bool | None:
        return False

    def last_page(self, data: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "NullPager()"


NULL_PAGER = NullPager()
