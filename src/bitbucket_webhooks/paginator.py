"""Presents list responses as restartable item sequences.

Bitbucket 2.0 collection responses look like::

    {"pagelen": 10, "page": 1, "size": 23, "values": [...], "next": "https://..."}
"""

from collections.abc import Callable, Iterator, Sequence

from loguru import logger

PAGE_FIELDS = ("page", "pagelen", "size", "next", "previous")


class ResponseCollection(Sequence):
    """One page of items plus its paging metadata.

    Iterating always starts from the first item, so the collection can be
    traversed any number of times.
    """

    def __init__(self, items=(), page: int | None = None, pagelen: int | None = None,
                 size: int | None = None, next: str | None = None, previous: str | None = None):
        self._items = tuple(items)
        self.page = page
        self.pagelen = pagelen
        self.size = size
        self.next = next
        self.previous = previous

    @classmethod
    def from_response(cls, response) -> "ResponseCollection":
        if response is None:
            return cls()
        if isinstance(response, dict):
            meta = {key: response.get(key) for key in PAGE_FIELDS}
            return cls(response.get("values", ()), **meta)
        if isinstance(response, (list, tuple)):
            return cls(response)
        raise TypeError(f"Cannot iterate over response of type {type(response).__name__}")

    @property
    def has_next(self) -> bool:
        return bool(self.next)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __eq__(self, other):
        if isinstance(other, ResponseCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResponseCollection({list(self._items)!r}, page={self.page}, next={self.next!r})"


def wrap(response, consumer: Callable | None = None) -> ResponseCollection | None:
    """Wrap a list response.

    With a consumer, each item is passed to it in response order and None is
    returned. Without one, the ResponseCollection is returned.
    """
    collection = response if isinstance(response, ResponseCollection) else ResponseCollection.from_response(response)
    if consumer is None:
        return collection
    for item in collection:
        consumer(item)
    return None


def iter_pages(transport, first_page) -> Iterator[ResponseCollection]:
    """Yield the first page, then fetch and yield each following page on demand."""
    page = first_page if isinstance(first_page, ResponseCollection) else ResponseCollection.from_response(first_page)
    yield page
    while page.has_next:
        logger.debug(f"Fetching next page: {page.next}")
        page = ResponseCollection.from_response(transport.request("GET", page.next, {}))
        yield page


def iter_items(transport, first_page) -> Iterator:
    """Yield every item across all pages."""
    for page in iter_pages(transport, first_page):
        yield from page
