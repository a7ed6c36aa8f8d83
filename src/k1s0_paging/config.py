"""ページングルール定義の型（pydantic BaseModel）"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import PagingRule


class PagingRuleConfig(BaseModel):
    """1オペレーション分のページングルール定義。

    limit_key や result_key など、ここで使わないキーは無視する。
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    input_token: list[str]
    output_token: list[str]
    more_results: str | None = None

    @field_validator("input_token", "output_token", mode="before")
    @classmethod
    def _single_token_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def to_rule(self) -> PagingRule:
        return PagingRule(
            input_tokens=tuple(self.input_token),
            output_tokens=tuple(self.output_token),
            more_results=self.more_results,
        )


class PagingConfig(BaseModel):
    """サービス全体のページングルール定義。"""

    pagination: dict[str, PagingRuleConfig] = Field(default_factory=dict)
