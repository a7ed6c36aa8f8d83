"""k1s0 paging library."""

from .config import PagingConfig, PagingRuleConfig
from .exceptions import (
    LastPageError,
    PagingError,
    PagingErrorCodes,
    UnsupportedOperationError,
)
from .loader import load_rules
from .models import (
    AsyncRequestHandle,
    Client,
    Countable,
    PagingRule,
    RequestContext,
    RequestHandle,
    Response,
)
from .naming import underscore
from .pageable import AsyncPageableResponse, PageableBase, PageableResponse
from .pager import NULL_PAGER, BasePager, NullPager, Pager
from .registry import PagerRegistry

__all__ = [
    "PagingRule",
    "BasePager",
    "Pager",
    "NullPager",
    "NULL_PAGER",
    "PageableBase",
    "PageableResponse",
    "AsyncPageableResponse",
    "PagerRegistry",
    "PagingConfig",
    "PagingRuleConfig",
    "load_rules",
    "underscore",
    "Client",
    "RequestHandle",
    "AsyncRequestHandle",
    "Countable",
    "RequestContext",
    "Response",
    "PagingError",
    "PagingErrorCodes",
    "LastPageError",
    "UnsupportedOperationError",
]
