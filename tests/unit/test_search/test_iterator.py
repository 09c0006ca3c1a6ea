"""Unit tests for the browse iterator."""

from __future__ import annotations

from typing import Any

import pytest

from algolia_client.core.exceptions import (
    AlgoliaException,
    AlgoliaHTTPError,
    NoMoreHitsError,
)
from algolia_client.core.schemas import BrowseRes
from algolia_client.search import BrowseIterator, OutcomeKind


class ScriptedIndex:
    """Index stand-in serving a fixed sequence of browse pages.

    Each page is a list of records or an exception to raise. Page ``i`` is
    served for cursor ``"c{i}"``; the first page answers the empty cursor.
    """

    name = "scripted"

    def __init__(self, pages: list[list[dict[str, Any]] | Exception]) -> None:
        self.pages = pages
        self.cursors: list[str] = []
        self.params: list[dict[str, Any]] = []

    async def browse(self, params, cursor: str = "", *, request_options=None) -> BrowseRes:
        self.cursors.append(cursor)
        self.params.append(dict(params))
        position = int(cursor[1:]) if cursor else 0
        page = self.pages[position]
        if isinstance(page, Exception):
            raise page
        next_cursor = f"c{position + 1}" if position + 1 < len(self.pages) else None
        return BrowseRes(hits=page, cursor=next_cursor)


def records(start: int, count: int) -> list[dict[str, Any]]:
    return [{"objectID": str(i)} for i in range(start, start + count)]


async def drain(iterator: BrowseIterator) -> list[dict[str, Any]]:
    out = []
    while True:
        try:
            out.append(await iterator.next())
        except NoMoreHitsError:
            return out


@pytest.mark.unit
class TestBrowseIterator:
    """Test suite for BrowseIterator.next()."""

    async def test_returns_every_record_in_order_then_signals_end(self):
        """Test N records over several pages come back in stored order."""
        index = ScriptedIndex([records(0, 3), records(3, 3), records(6, 1)])
        iterator = await BrowseIterator(index).start()

        result = await drain(iterator)

        assert [r["objectID"] for r in result] == [str(i) for i in range(7)]

    async def test_empty_index_signals_end_on_first_call(self):
        """Test that an empty first page without cursor ends immediately."""
        iterator = await BrowseIterator(ScriptedIndex([[]])).start()

        with pytest.raises(NoMoreHitsError):
            await iterator.next()

    async def test_exact_multiple_of_page_size(self):
        """Test that the end is signaled only after the last record of the last page."""
        index = ScriptedIndex([records(0, 2), records(2, 2)])
        iterator = await BrowseIterator(index).start()

        for expected in ("0", "1", "2", "3"):
            assert (await iterator.next())["objectID"] == expected
        with pytest.raises(NoMoreHitsError):
            await iterator.next()

    async def test_empty_middle_page_with_cursor_is_skipped(self):
        """Test that an empty page carrying a cursor triggers another fetch."""
        index = ScriptedIndex([records(0, 2), [], records(2, 2)])
        iterator = await BrowseIterator(index).start()

        result = await drain(iterator)

        assert [r["objectID"] for r in result] == ["0", "1", "2", "3"]
        assert index.cursors == ["", "c1", "c2"]

    async def test_each_cursor_is_used_once(self):
        """Test that no page is fetched twice."""
        index = ScriptedIndex([records(0, 1), records(1, 1), records(2, 1)])
        iterator = await BrowseIterator(index).start()

        await drain(iterator)
        with pytest.raises(NoMoreHitsError):
            await iterator.next()

        assert index.cursors == ["", "c1", "c2"]
        assert iterator.pages_fetched == 3

    async def test_no_io_while_page_is_buffered(self):
        """Test that records of the current page are served without fetching."""
        index = ScriptedIndex([records(0, 5), records(5, 5)])
        iterator = await BrowseIterator(index).start()

        for _ in range(5):
            await iterator.next()

        assert index.cursors == [""]

    async def test_failure_on_third_page_propagates_original_error(self):
        """Test that records of the first two pages come back, then the error."""
        failure = AlgoliaHTTPError(status_code=403, detail="Method not allowed with this API key")
        index = ScriptedIndex([records(0, 2), records(2, 2), failure])
        iterator = await BrowseIterator(index).start()

        seen = [await iterator.next() for _ in range(4)]
        with pytest.raises(AlgoliaHTTPError) as exc_info:
            await iterator.next()

        assert [r["objectID"] for r in seen] == ["0", "1", "2", "3"]
        assert exc_info.value is failure

    async def test_failed_iterator_reraises_same_error(self):
        """Test that a failed iterator does not fetch again nor signal the end."""
        failure = AlgoliaHTTPError(status_code=500, detail="boom")
        index = ScriptedIndex([records(0, 1), failure])
        iterator = await BrowseIterator(index).start()
        await iterator.next()

        for _ in range(3):
            with pytest.raises(AlgoliaHTTPError) as exc_info:
                await iterator.next()
            assert exc_info.value is failure

        assert index.cursors == ["", "c1"]

    async def test_cursor_kept_after_failed_fetch(self):
        """Test that the cursor still reflects the last successful page after a failure."""
        index = ScriptedIndex([records(0, 1), AlgoliaHTTPError(status_code=500, detail="boom")])
        iterator = await BrowseIterator(index).start()
        await iterator.next()

        with pytest.raises(AlgoliaHTTPError):
            await iterator.next()

        assert iterator.cursor == "c1"

    async def test_cursor_cleared_after_last_page(self):
        index = ScriptedIndex([records(0, 1), records(1, 1)])
        iterator = await BrowseIterator(index).start()

        await drain(iterator)

        assert iterator.cursor is None

    async def test_end_signal_is_not_an_algolia_exception(self):
        """Test that exhaustion is distinguishable from every failure type."""
        assert not issubclass(NoMoreHitsError, AlgoliaException)

        iterator = await BrowseIterator(ScriptedIndex([[]])).start()
        with pytest.raises(NoMoreHitsError) as exc_info:
            await iterator.next()
        assert not isinstance(exc_info.value, AlgoliaException)

    async def test_params_are_immutable_and_resent(self):
        """Test that the original parameters are sent with every page."""
        params = {"filters": "brand:acme"}
        index = ScriptedIndex([records(0, 1), records(1, 1)])
        iterator = await BrowseIterator(index, params).start()
        params["filters"] = "changed"

        await drain(iterator)

        assert index.params == [{"filters": "brand:acme"}, {"filters": "brand:acme"}]
        with pytest.raises(TypeError):
            iterator.params["filters"] = "other"  # type: ignore[index]


@pytest.mark.unit
class TestBrowseIteratorProtocols:
    """Test suite for async iteration and tagged outcomes."""

    async def test_async_for_stops_at_end(self):
        """Test that ``async for`` yields every record and stops cleanly."""
        index = ScriptedIndex([records(0, 2), [], records(2, 1)])
        iterator = await BrowseIterator(index).start()

        seen = [record["objectID"] async for record in iterator]

        assert seen == ["0", "1", "2"]

    async def test_async_for_propagates_failures(self):
        """Test that a fetch failure escapes the loop unchanged."""
        failure = AlgoliaHTTPError(status_code=400, detail="bad cursor")
        iterator = await BrowseIterator(ScriptedIndex([records(0, 1), failure])).start()

        seen = []
        with pytest.raises(AlgoliaHTTPError):
            async for record in iterator:
                seen.append(record)

        assert len(seen) == 1

    async def test_next_outcome_tags_records_end_and_failure(self):
        """Test that every step is reported as a tagged outcome."""
        failure = AlgoliaHTTPError(status_code=400, detail="bad cursor")
        iterator = await BrowseIterator(ScriptedIndex([records(0, 1), failure])).start()

        first = await iterator.next_outcome()
        second = await iterator.next_outcome()

        assert first.kind is OutcomeKind.RECORD
        assert first.is_record
        assert first.record == {"objectID": "0"}
        assert second.kind is OutcomeKind.FAILURE
        assert second.is_failure
        assert second.error is failure
        assert second.record is None

    async def test_next_outcome_reports_end(self):
        """Test that exhaustion is reported as END, repeatedly."""
        iterator = await BrowseIterator(ScriptedIndex([records(0, 1)])).start()

        await iterator.next_outcome()
        end = await iterator.next_outcome()
        again = await iterator.next_outcome()

        assert end.kind is OutcomeKind.END
        assert end.is_end
        assert end.record is None
        assert end.error is None
        assert again.is_end
