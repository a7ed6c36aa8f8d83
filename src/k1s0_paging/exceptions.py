"""paging ライブラリの例外型定義"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pageable import PageableBase


class PagingError(Exception):
    """paging ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PagingErrorCodes:
    """PagingError のエラーコード定数。"""

    LAST_PAGE: str = "LAST_PAGE"
    UNSUPPORTED_OPERATION: str = "UNSUPPORTED_OPERATION"
    INVALID_RULE: str = "INVALID_RULE"
    UNKNOWN_OPERATION: str = "UNKNOWN_OPERATION"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class LastPageError(PagingError):
    """最終ページでさらに次のページを要求したときのエラー。

    response には次ページへ進めなかったページが入る。
    終端の原因がエラーレスポンスの場合は response.error で確認できる。
    """

    def __init__(self, response: PageableBase) -> None:
        super().__init__(
            code=PagingErrorCodes.LAST_PAGE,
            message="unable to fetch next page: already on the last page",
        )
        self.response = response


class UnsupportedOperationError(PagingError, NotImplementedError):
    """ページのデータが転送対象の操作を持たないときのエラー。"""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=PagingErrorCodes.UNSUPPORTED_OPERATION,
            message=f"page data does not support {operation!r}",
        )
        self.operation = operation
