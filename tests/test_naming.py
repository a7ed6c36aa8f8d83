"""名前変換とパス解決のユニットテスト"""

import pytest
from k1s0_paging.naming import is_present, normalize_path, resolve_path, underscore


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("NextToken", "next_token"),
        ("Offset", "offset"),
        ("OffsetA", "offset_a"),
        ("IsTruncated", "is_truncated"),
        ("ETagValue", "e_tag_value"),
        ("NextKeyMarker2", "next_key_marker2"),
        ("next_token", "next_token"),
    ],
)
def test_underscore(name: str, expected: str) -> None:
    """ワイヤ名がスネークケースに変換されること。"""
    assert underscore(name) == expected


def test_normalize_path() -> None:
    """各セグメントが正規化されること。"""
    assert normalize_path("ListResult.NextMarker") == ("list_result", "next_marker")


def test_resolve_path() -> None:
    """ネストした値を取得できること。"""
    data = {"a": {"b": {"c": 1}}}
    assert resolve_path(data, ("a", "b", "c")) == 1
    assert resolve_path(data, ("a", "x")) is None
    assert resolve_path(data, ("a", "b", "c", "d")) is None
    assert resolve_path(None, ("a",)) is None


def test_is_present() -> None:
    """None と空コンテナは存在しないと判定されること。"""
    assert is_present(None) is False
    assert is_present({}) is False
    assert is_present([]) is False
    assert is_present(()) is False
    assert is_present("") is True
    assert is_present(0) is True
    assert is_present(False) is True
    assert is_present(["x"]) is True
    assert is_present({"k": "v"}) is True
