import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from stat_chart import render_chart

logger = logging.getLogger('pokedex.gallery')


class DismissTarget(enum.Enum):
    BACKDROP = 'backdrop'
    CLOSE_CONTROL = 'close-control'
    CONTENT = 'content'


@dataclass(frozen=True)
class DetailView:
    index: int
    record: Any
    display_name: str
    image_url: Optional[str]
    experience: Optional[int]
    background: str
    types: Tuple[str, ...]
    height_m: float
    weight_kg: float
    chart: Any


class GalleryNavigator:
    """Fullscreen viewer over the catalogue with wraparound previous/next.

    Navigating past either end wraps over the records already loaded; it never
    triggers loading more.
    """

    def __init__(self, catalogue, chart_factory=render_chart, viewport_width=None):
        self.catalogue = catalogue
        self.chart_factory = chart_factory
        self.viewport_width = viewport_width
        self.open_index = None
        self.view = None

    @property
    def is_open(self):
        return self.open_index is not None

    def open(self, index):
        if not 1 <= index <= len(self.catalogue):
            raise IndexError(f"cannot open {index}: catalogue holds {len(self.catalogue)} records")
        record = self.catalogue.get(index)
        self.view = DetailView(
            index=index,
            record=record,
            display_name=record.display_name,
            image_url=record.image_url,
            experience=record.experience,
            background=f"bg-{record.primary_type}",
            types=record.types,
            height_m=record.height_m,
            weight_kg=record.weight_kg,
            chart=self.chart_factory(record, self.viewport_width),
        )
        self.open_index = index
        logger.debug('Opened detail view index=%s name=%s', index, record.name)
        return self.view

    def previous(self, index):
        if index > 1:
            return self.open(index - 1)
        return self.open(len(self.catalogue))

    def next(self, index):
        if index < len(self.catalogue):
            return self.open(index + 1)
        return self.open(1)

    def close(self, target):
        """Close for a backdrop or close-control dismissal; anything else is ignored."""
        if target not in (DismissTarget.BACKDROP, DismissTarget.CLOSE_CONTROL):
            return False
        self.open_index = None
        self.view = None
        return True
