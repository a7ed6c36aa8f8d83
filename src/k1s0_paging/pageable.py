"""PageableResponse — 1ページ分のレスポンスを包むデコレーター"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Iterator, Sequence
from typing import Any

from .exceptions import LastPageError, UnsupportedOperationError
from .models import Countable
from .pager import BasePager

logger = logging.getLogger(__name__)

# ページデータへ転送する操作と、データが満たすべきプロトコル
_FORWARDED_OPERATIONS: dict[str, type] = {"count": Countable}


def _implements(data: Any, operation: str, protocol: type) -> bool:
    # list.count(x) や str.count(sub) は要素数ではないので対象外
    if isinstance(data, (str, bytes, Sequence)):
        return False
    # 同名のフィールド（件数など）はメソッドではない
    if not callable(getattr(data, operation, None)):
        return False
    return isinstance(data, protocol)


class PageableBase:
    """同期・非同期の PageableResponse に共通する処理。

    インスタンスは生成後に変更されない。次ページは常に新しいインスタンスになる。
    """

    def __init__(self, response: Any, pager: BasePager) -> None:
        self._response = response
        self._pager = pager

    @property
    def response(self) -> Any:
        return self._response

    @property
    def pager(self) -> BasePager:
        return self._pager

    @property
    def data(self) -> Any:
        return self._response.data

    @property
    def error(self) -> Any:
        return self._response.error

    @property
    def context(self) -> Any:
        return self._response.context

    def last_page(self) -> bool:
        """このページが最終ページなら True を返す。

        エラーを持つレスポンスは常に最終ページとして扱う。
        """
        if self._response.error is not None:
            logger.debug(
                "Treating errored response as last page",
                extra={"error": str(self._response.error)},
            )
            return True
        return self._pager.last_page(self._response.data)

    def next_page(self) -> bool:
        """次のページが存在すれば True を返す。"""
        return not self.last_page()

    def supports(self, operation: str) -> bool:
        """ページデータが operation を提供しているか返す。操作自体は実行しない。"""
        protocol = _FORWARDED_OPERATIONS.get(operation)
        if protocol is None:
            return False
        return _implements(self._response.data, operation, protocol)

    def count(self) -> int:
        """ページデータの count() を呼び出す。

        Raises:
            UnsupportedOperationError: データが count() を持たない場合
        """
        if not self.supports("count"):
            raise UnsupportedOperationError("count")
        return self._response.data.count()

    def _next_request(self) -> tuple[Any, dict[str, Any]]:
        if self.last_page():
            raise LastPageError(self)
        context = self._response.context
        params = dict(getattr(context, "original_params", None) or {})
        params.update(self._pager.tokens(self._response.data))
        logger.debug(
            "Requesting next page",
            extra={
                "operation_name": context.operation_name,
                "params": sorted(params),
            },
        )
        return context, params

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pager={self._pager!r}, "
            f"last_page={self.last_page()})"
        )


class PageableResponse(PageableBase):
    """ページング可能なレスポンス。"""

    def advance(self) -> PageableResponse:
        """次ページのリクエストを送信し、新しい PageableResponse を返す。

        パラメータは最初のリクエストのパラメータにトークンを上書きしたもの。

        Raises:
            LastPageError: このページが最終ページの場合
        """
        context, params = self._next_request()
        request = context.client.build_request(context.operation_name, params)
        return PageableResponse(request.send_request(), self._pager)

    def pages(self) -> Iterator[PageableResponse]:
        """このページから最終ページまでを順に返す。

        最終ページも含めて返し、それ以降は advance() を呼ばない。
        呼び出すたびに先頭から新しくリクエストを送信する。
        """
        page = self
        yield page
        while page.next_page():
            page = page.advance()
            yield page

    def __iter__(self) -> Iterator[PageableResponse]:
        return self.pages()


class AsyncPageableResponse(PageableBase):
    """asyncio クライアント用のページング可能なレスポンス。"""

    async def advance(self) -> AsyncPageableResponse:
        """次ページのリクエストを送信し、新しい AsyncPageableResponse を返す。

        Raises:
            LastPageError: このページが最終ページの場合
        """
        context, params = self._next_request()
        request = context.client.build_request(context.operation_name, params)
        if inspect.isawaitable(request):
            request = await request
        response = await request.send_request()
        return AsyncPageableResponse(response, self._pager)

    async def pages(self) -> AsyncIterator[AsyncPageableResponse]:
        """このページから最終ページまでを順に返す。"""
        page = self
        yield page
        while page.next_page():
            page = await page.advance()
            yield page

    def __aiter__(self) -> AsyncIterator[AsyncPageableResponse]:
        return self.pages()
