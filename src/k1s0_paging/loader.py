"""ページングルール定義ファイルの読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import PagingError, PagingErrorCodes
from .registry import PagerRegistry


def _parse_definitions(text: str, source: Path) -> Any:
    """定義テキストをパースする。JSON は YAML として読める。"""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PagingError(
            code=PagingErrorCodes.PARSE_YAML,
            message=f"Failed to parse paging rules: {source}",
            cause=e,
        ) from e


def load_rules(path: Path | str) -> PagerRegistry:
    """ページングルール定義ファイルを読み込んで PagerRegistry を返す。

    プロセス起動時に一度だけ呼び、返したレジストリを共有する想定。
    空のファイルは定義なしとして扱う。
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        raise PagingError(
            code=PagingErrorCodes.READ_FILE,
            message=f"Failed to read paging rules: {source}",
            cause=e,
        ) from e

    definitions = _parse_definitions(text, source)
    if definitions is None:
        return PagerRegistry()
    if not isinstance(definitions, dict):
        raise PagingError(
            code=PagingErrorCodes.VALIDATION,
            message=(
                f"Paging rules must be a mapping of operation names: {source} "
                f"(got {type(definitions).__name__})"
            ),
        )
    return PagerRegistry.from_dict(definitions)
