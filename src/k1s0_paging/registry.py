"""オペレーション名から Pager を引く読み取り専用レジストリ"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from .config import PagingConfig
from .exceptions import PagingError, PagingErrorCodes
from .models import PagingRule
from .pageable import AsyncPageableResponse, PageableResponse
from .pager import NULL_PAGER, BasePager, Pager

logger = logging.getLogger(__name__)


class PagerRegistry(Mapping[str, BasePager]):
    """オペレーションごとの Pager を保持する。

    Pager は生成時に一度だけ作られ、以降は変更されない。
    ページング定義のないオペレーションには共有の NullPager を返す。
    """

    def __init__(self, rules: Mapping[str, PagingRule] | None = None) -> None:
        rules = dict(rules or {})
        self._rules: Mapping[str, PagingRule] = MappingProxyType(rules)
        self._pagers: Mapping[str, BasePager] = MappingProxyType(
            {name: Pager(rule) for name, rule in rules.items()}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PagerRegistry:
        """ページング定義の辞書から生成する。

        {"pagination": {...}} 形式と、オペレーション名を直接キーにした形式の両方を受け付ける。
        """
        if "pagination" not in data:
            data = {"pagination": data}
        try:
            config = PagingConfig.model_validate(data)
        except ValidationError as e:
            raise PagingError(
                code=PagingErrorCodes.VALIDATION,
                message=f"Paging rule validation failed: {e}",
                cause=e,
            ) from e
        registry = cls(
            {name: rule.to_rule() for name, rule in config.pagination.items()}
        )
        logger.info(
            "Loaded paging rules",
            extra={"operation_count": len(registry)},
        )
        return registry

    def rule(self, operation_name: str) -> PagingRule:
        """オペレーションのページングルールを返す。"""
        try:
            return self._rules[operation_name]
        except KeyError:
            raise PagingError(
                code=PagingErrorCodes.UNKNOWN_OPERATION,
                message=f"no paging rule for operation: {operation_name}",
            ) from None

    def pager_for(self, operation_name: str) -> BasePager:
        """オペレーションの Pager を返す。定義がなければ NullPager。"""
        return self._pagers.get(operation_name, NULL_PAGER)

    def wrap(self, response: Any) -> PageableResponse:
        """レスポンスを PageableResponse で包む。"""
        return PageableResponse(
            response, self.pager_for(response.context.operation_name)
        )

    def wrap_async(self, response: Any) -> AsyncPageableResponse:
        """レスポンスを AsyncPageableResponse で包む。"""
        return AsyncPageableResponse(
            response, self.pager_for(response.context.operation_name)
        )

    def __getitem__(self, operation_name: str) -> BasePager:
        return self._pagers[operation_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pagers)

    def __len__(self) -> int:
        return len(self._pagers)
