"""Cursor-based iteration over every record of an index.

A :class:`BrowseIterator` hands out records one at a time from a buffered
browse page and fetches the next page, using the cursor returned with the
previous one, only when the buffer runs dry. Each cursor is sent once.

Example:
    ```python
    iterator = await index.browse_all({"filters": "brand:acme"})
    async for record in iterator:
        print(record["objectID"])
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from algolia_client.core.exceptions import NoMoreHitsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from algolia_client.core.schemas import BrowseRes, Record, RequestOptions
    from algolia_client.search.index import Index

logger = logging.getLogger(__name__)


class OutcomeKind(StrEnum):
    RECORD = "record"
    END = "end"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class BrowseOutcome:
    """Result of one step of a browse iteration.

    Exactly one of ``record`` (for ``RECORD``) or ``error`` (for ``FAILURE``)
    is set; ``END`` carries neither.
    """

    kind: OutcomeKind
    record: Record | None = None
    error: Exception | None = None

    @property
    def is_record(self) -> bool:
        return self.kind is OutcomeKind.RECORD

    @property
    def is_end(self) -> bool:
        return self.kind is OutcomeKind.END

    @property
    def is_failure(self) -> bool:
        return self.kind is OutcomeKind.FAILURE


class BrowseIterator:
    """Iterate over all records of an index, one page at a time.

    Obtain one through :meth:`Index.browse_all`, which performs the first
    fetch. The iterator is owned by a single task; it keeps no connection
    open between calls.

    Once exhausted, every call to :meth:`next` raises
    :class:`NoMoreHitsError`. Once a fetch has failed, every call re-raises
    that same exception.
    """

    def __init__(
        self,
        index: Index,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> None:
        self._index = index
        self._params: Mapping[str, Any] = MappingProxyType(dict(params or {}))
        self._request_options = request_options
        self._page: list[Record] = []
        self._offset = 0
        self._cursor: str | None = None
        self._exhausted = False
        self._error: Exception | None = None
        self.pages_fetched = 0

    @property
    def params(self) -> Mapping[str, Any]:
        """The query parameters sent with every page request (read-only)."""
        return self._params

    @property
    def cursor(self) -> str | None:
        """Cursor of the next page, ``None`` once the last page was fetched."""
        return self._cursor

    async def start(self) -> BrowseIterator:
        """Fetch the first page (empty cursor)."""
        await self._fetch("")
        return self

    async def _fetch(self, cursor: str) -> None:
        page: BrowseRes = await self._index.browse(
            self._params, cursor=cursor, request_options=self._request_options
        )
        self._page = page.hits
        self._offset = 0
        self._cursor = page.cursor or None
        self.pages_fetched += 1
        logger.debug(
            f"Fetched browse page {self.pages_fetched} of {self._index.name}",
            extra={
                "index": self._index.name,
                "page": self.pages_fetched,
                "hits": len(page.hits),
                "has_more": self._cursor is not None,
            },
        )

    async def next(self) -> Record:
        """Return the next record.

        Raises:
            NoMoreHitsError: Every record has been returned.
            AlgoliaException: Fetching a page failed (re-raised on later calls).
        """
        if self._error is not None:
            raise self._error
        if self._exhausted:
            raise NoMoreHitsError()

        # Empty pages may still carry a cursor
        while self._offset >= len(self._page):
            if self._cursor is None:
                self._exhausted = True
                raise NoMoreHitsError()
            try:
                await self._fetch(self._cursor)
            except Exception as e:
                self._error = e
                logger.warning(
                    f"Browse of {self._index.name} failed",
                    extra={
                        "index": self._index.name,
                        "page": self.pages_fetched + 1,
                        "exception": str(e),
                    },
                )
                raise

        record = self._page[self._offset]
        self._offset += 1
        return record

    async def next_outcome(self) -> BrowseOutcome:
        """Like :meth:`next`, but report the outcome as a tagged value."""
        try:
            record = await self.next()
        except NoMoreHitsError:
            return BrowseOutcome(OutcomeKind.END)
        except Exception as e:
            return BrowseOutcome(OutcomeKind.FAILURE, error=e)
        return BrowseOutcome(OutcomeKind.RECORD, record=record)

    def __aiter__(self) -> BrowseIterator:
        return self

    async def __anext__(self) -> Record:
        try:
            return await self.next()
        except NoMoreHitsError:
            raise StopAsyncIteration from None


__all__ = ["BrowseIterator", "BrowseOutcome", "OutcomeKind"]
