from dataclasses import dataclass
from typing import Tuple

MIN_QUERY_LENGTH = 3


@dataclass(frozen=True)
class SearchResult:
    query: str
    visible_ids: Tuple[int, ...]
    no_results: bool

    def is_visible(self, index):
        return index in self.visible_ids


class SearchFilter:
    """Case-insensitive name search over the records loaded so far.

    Queries shorter than MIN_QUERY_LENGTH show every card.
    """

    def __init__(self, catalogue):
        self.catalogue = catalogue

    def filter(self, query):
        query = query or ''
        items = self.catalogue.items()
        if len(query) < MIN_QUERY_LENGTH:
            return SearchResult(query, tuple(index for index, _ in items), False)
        needle = query.lower()
        matches = tuple(
            index for index, record in items if needle in record.display_name.lower()
        )
        return SearchResult(query, matches, not matches)

    def clear(self):
        return self.filter('')
