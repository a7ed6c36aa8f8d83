"""AsyncPageableResponse のユニットテスト"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from k1s0_paging.exceptions import LastPageError
from k1s0_paging.models import RequestContext, Response
from k1s0_paging.pageable import AsyncPageableResponse
from k1s0_paging.pager import NullPager, Pager

SINGLE_TOKEN = {"input_token": "Offset", "output_token": "NextToken"}


def _response(data: Any = None, client: Any = None) -> Response:
    context = RequestContext(
        client=client,
        operation_name="operation-name",
        params={"bucket": "b"},
        original_params={"bucket": "b"},
    )
    return Response(data=data, context=context)


def _async_client(*responses: Response) -> MagicMock:
    request = MagicMock()
    request.send_request = AsyncMock(side_effect=list(responses))
    client = MagicMock()
    client.build_request.return_value = request
    for response in responses:
        response.context.client = client
    return client


@pytest.mark.asyncio
async def test_advance_awaits_send_request() -> None:
    """advance が send_request を await して次ページを返すこと。"""
    page2_response = _response({})
    client = _async_client(page2_response)
    page = AsyncPageableResponse(
        _response({"next_token": "OFFSET"}, client), Pager.from_dict(SINGLE_TOKEN)
    )

    next_page = await page.advance()

    client.build_request.assert_called_once_with(
        "operation-name", {"bucket": "b", "offset": "OFFSET"}
    )
    client.build_request.return_value.send_request.assert_awaited_once()
    assert isinstance(next_page, AsyncPageableResponse)
    assert next_page.response is page2_response
    assert next_page.last_page() is True


@pytest.mark.asyncio
async def test_advance_awaits_async_build_request() -> None:
    """build_request がコルーチンでも動作すること。"""
    request = MagicMock()
    request.send_request = AsyncMock(return_value=_response({}))
    client = MagicMock()
    client.build_request = AsyncMock(return_value=request)
    page = AsyncPageableResponse(
        _response({"next_token": "OFFSET"}, client), Pager.from_dict(SINGLE_TOKEN)
    )

    next_page = await page.advance()

    client.build_request.assert_awaited_once_with(
        "operation-name", {"bucket": "b", "offset": "OFFSET"}
    )
    assert next_page.data == {}


@pytest.mark.asyncio
async def test_advance_on_last_page_raises() -> None:
    """最終ページで advance すると LastPageError になること。"""
    page = AsyncPageableResponse(_response({}), NullPager())
    with pytest.raises(LastPageError) as exc_info:
        await page.advance()
    assert exc_info.value.response is page


@pytest.mark.asyncio
async def test_pages_yields_every_page() -> None:
    """async for で最終ページまで順に取得できること。"""
    client = _async_client(_response({"next_token": "T2"}), _response({}))
    page = AsyncPageableResponse(
        _response({"next_token": "T1"}, client), Pager.from_dict(SINGLE_TOKEN)
    )

    data = [p.data async for p in page.pages()]

    assert data == [{"next_token": "T1"}, {"next_token": "T2"}, {}]
    assert [c.args[1]["offset"] for c in client.build_request.call_args_list] == [
        "T1",
        "T2",
    ]


@pytest.mark.asyncio
async def test_async_iteration_matches_pages() -> None:
    """AsyncPageableResponse を直接 async for できること。"""
    client = _async_client(_response({}))
    page = AsyncPageableResponse(
        _response({"next_token": "T1"}, client), Pager.from_dict(SINGLE_TOKEN)
    )
    pages = [p async for p in page]
    assert len(pages) == 2
    assert pages[0] is page


@pytest.mark.asyncio
async def test_pages_early_stop() -> None:
    """途中で消費をやめても追加のリクエストを送らないこと。"""
    client = _async_client(_response({"next_token": "T2"}), _response({}))
    page = AsyncPageableResponse(
        _response({"next_token": "T1"}, client), Pager.from_dict(SINGLE_TOKEN)
    )
    async for p in page.pages():
        if p is page:
            break
    client.build_request.assert_not_called()
