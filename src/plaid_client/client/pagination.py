"""
Lazy paging over /transactions/get.

TransactionsPager hides the count/offset bookkeeping of the transactions
endpoint. Each call to ``fetch_next`` (or each step of iteration) issues at
most one request; nothing is fetched ahead of the consumer.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional

from ..models.transactions import (
    DEFAULT_PAGE_SIZE,
    GetTransactionsOptions,
    GetTransactionsRequest,
    GetTransactionsResponse,
    Transaction,
)
from ..runtime.errors import ClientError


logger = logging.getLogger(__name__)

FetchPage = Callable[[GetTransactionsRequest], GetTransactionsResponse]


class PagerState(Enum):
    INITIALIZED = "initialized"
    AWAITING_PAGE = "awaiting_page"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass(frozen=True)
class TransactionPage:
    """One batch of transactions and whether more are expected."""
    transactions: List[Transaction]
    has_more: bool


class TransactionsPager:
    """
    Cursor over the pages of a transactions request.

    Offsets are absolute from the caller's starting offset: after each page
    the offset advances by the cumulative number of transactions yielded so
    far, not by the size of the last page. The number of transactions to
    read is fixed by the first response as ``total_transactions`` minus the
    starting offset.

    A pager is single use. Once it is exhausted or a page fails it will not
    issue further requests; build a new one from the same request to start
    over.

    Example:
        ```python
        pager = client.transactions_iter(GetTransactionsRequest(
            access_token=token,
            start_date="2019-09-01",
            end_date="2021-09-05",
            options=GetTransactionsOptions(count=10, offset=5),
        ))
        for batch in pager:
            handle(batch)
        ```
    """

    def __init__(self, fetch: FetchPage, request: GetTransactionsRequest):
        """
        Initialize a pager.

        Args:
            fetch: Sends one transactions request and returns its response
            request: Base request; it is copied and never mutated
        """
        self._fetch = fetch
        self._request = request.model_copy(deep=True)

        options = self._request.options or GetTransactionsOptions()
        self._count = options.count if options.count is not None else DEFAULT_PAGE_SIZE
        self._offset = options.offset if options.offset is not None else 0
        self._initial_offset = self._offset
        self._yielded = 0
        self._target: Optional[int] = None
        self._state = PagerState.INITIALIZED

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def offset(self) -> int:
        """Offset the next page request will use."""
        return self._offset

    @property
    def yielded(self) -> int:
        """Number of transactions returned so far."""
        return self._yielded

    @property
    def remaining(self) -> Optional[int]:
        """Transactions still expected, or None before the first page."""
        if self._target is None:
            return None
        return max(self._target - self._yielded, 0)

    def _has_more(self) -> bool:
        return self._target is None or self._target > self._yielded

    def _page_request(self) -> GetTransactionsRequest:
        options = self._request.options or GetTransactionsOptions()
        options = options.model_copy(update={"count": self._count, "offset": self._offset})
        return self._request.model_copy(update={"options": options})

    def fetch_next(self) -> Optional[TransactionPage]:
        """
        Fetch the next page.

        Returns:
            The next TransactionPage, or None when the sequence is complete

        Raises:
            ClientError: The page request failed; the pager is now FAILED
            RuntimeError: The pager already failed
        """
        if self._state is PagerState.FAILED:
            raise RuntimeError("transactions pager already failed; create a new one")
        if self._state is PagerState.EXHAUSTED:
            return None
        if not self._has_more():
            self._state = PagerState.EXHAUSTED
            return None

        self._state = PagerState.AWAITING_PAGE
        logger.debug("fetching transactions page count=%d offset=%d", self._count, self._offset)
        try:
            response = self._fetch(self._page_request())
        except ClientError:
            self._state = PagerState.FAILED
            raise

        if self._target is None:
            self._target = response.total_transactions - self._initial_offset

        batch = list(response.transactions)
        self._yielded += len(batch)
        self._offset += self._yielded

        if not batch and self._has_more():
            # The server has nothing further even though the total says otherwise.
            logger.debug(
                "empty transactions page with %d expected; stopping", self._target - self._yielded
            )
            self._target = self._yielded

        more = self._has_more()
        if not more:
            self._state = PagerState.EXHAUSTED
        return TransactionPage(transactions=batch, has_more=more)

    def __iter__(self) -> Iterator[List[Transaction]]:
        while True:
            page = self.fetch_next()
            if page is None:
                return
            yield page.transactions
            if not page.has_more:
                return

    def collect(self) -> List[Transaction]:
        """Drain the pager and return every transaction in order."""
        result: List[Transaction] = []
        for batch in self:
            result.extend(batch)
        return result


__all__ = ["PagerState", "TransactionPage", "TransactionsPager"]
