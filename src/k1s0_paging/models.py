"""ページングのデータモデルと外部コラボレーターのプロトコル"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .exceptions import PagingError, PagingErrorCodes


def _as_tuple(value: str | Sequence[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class PagingRule:
    """オペレーションごとのページングルール。

    input_tokens と output_tokens は位置で対応する。
    more_results が設定されていれば、その真偽値がトークンの有無より優先される。
    """

    input_tokens: tuple[str, ...]
    output_tokens: tuple[str, ...]
    more_results: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_tokens", _as_tuple(self.input_tokens))
        object.__setattr__(self, "output_tokens", _as_tuple(self.output_tokens))
        if not self.input_tokens or not self.output_tokens:
            raise PagingError(
                code=PagingErrorCodes.INVALID_RULE,
                message="input_token and output_token must name at least one token",
            )
        if len(self.input_tokens) != len(self.output_tokens):
            raise PagingError(
                code=PagingErrorCodes.INVALID_RULE,
                message=(
                    f"input_token count ({len(self.input_tokens)}) does not match "
                    f"output_token count ({len(self.output_tokens)})"
                ),
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PagingRule:
        """input_token / output_token / more_results 形式のメタデータから生成する。"""
        return cls(
            input_tokens=_as_tuple(data.get("input_token")),
            output_tokens=_as_tuple(data.get("output_token")),
            more_results=data.get("more_results"),
        )


class RequestHandle(Protocol):
    """組み立て済みリクエスト。"""

    def send_request(self) -> Any: ...


class AsyncRequestHandle(Protocol):
    """組み立て済みリクエスト（非同期）。"""

    def send_request(self) -> Awaitable[Any]: ...


class Client(Protocol):
    """リクエストを組み立てるサービスクライアント。"""

    def build_request(self, operation_name: str, params: dict[str, Any]) -> Any: ...


@runtime_checkable
class Countable(Protocol):
    """要素数を返せるページデータ。"""

    def count(self) -> int: ...


@dataclass
class RequestContext:
    """レスポンスの元になったリクエストの情報。

    original_params はチェーンの最初のリクエストで使ったパラメータ。
    """

    client: Any = None
    operation_name: str = ""
    params: dict[str, Any] = field(default_factory=dict)
    original_params: dict[str, Any] | None = None


@dataclass
class Response:
    """パース済みのサービスレスポンス。"""

    data: Any = None
    error: Exception | None = None
    context: RequestContext = field(default_factory=RequestContext)
