import logging
from dataclasses import dataclass
from typing import Optional

from catalogue import BatchLoader, Catalogue
from errors import BatchLoadError
from gallery import GalleryNavigator
from pokeapi_client import PokeAPIClient
from search import SearchFilter
from stat_chart import update_font_size
from theme import ThemeStore

logger = logging.getLogger('pokedex.app')


@dataclass
class AppState:
    catalogue: Catalogue
    loader: BatchLoader
    search_filter: SearchFilter
    gallery: GalleryNavigator
    dark_theme: bool = False
    query: str = ''
    loading: bool = False
    last_error: Optional[BatchLoadError] = None


class PokedexController:
    """Owns the session state and is the only place that mutates it."""

    def __init__(self, settings, client=None, theme_store=None, render=None, sleep=None):
        self.settings = settings
        self.client = client or PokeAPIClient(settings.api_base, timeout=settings.http_timeout)
        self.theme_store = theme_store or ThemeStore(settings.theme_file)
        self._render = render
        catalogue = Catalogue()
        loader_kwargs = {}
        if sleep is not None:
            loader_kwargs['sleep'] = sleep
        loader = BatchLoader(
            self.client,
            catalogue,
            batch_size=settings.batch_size,
            render=self._render_card,
            render_delay=settings.render_delay,
            on_loading=self._set_loading,
            max_workers=settings.max_workers,
            **loader_kwargs,
        )
        self.state = AppState(
            catalogue=catalogue,
            loader=loader,
            search_filter=SearchFilter(catalogue),
            gallery=GalleryNavigator(catalogue, viewport_width=settings.viewport_width),
        )
        update_font_size(settings.viewport_width)

    def _render_card(self, index, record):
        if self._render is not None:
            self._render(index, record)

    def _set_loading(self, active):
        self.state.loading = active

    def set_renderer(self, render):
        self._render = render

    def start(self):
        """Read the stored theme and load the first batch."""
        self.state.dark_theme = self.theme_store.load()
        if not len(self.state.catalogue):
            self._run_load(self.state.loader.load_initial)

    def load_more(self):
        self.state.query = ''
        return self._run_load(self.state.loader.load_more)

    def retry(self):
        if self.state.last_error is None:
            return []
        if not len(self.state.catalogue):
            return self._run_load(self.state.loader.load_initial)
        return self._run_load(self.state.loader.load_more)

    def _run_load(self, operation):
        try:
            records = operation()
        except BatchLoadError as exc:
            self.state.last_error = exc
            logger.warning('Load failed, waiting for retry: %s', exc)
            return []
        self.state.last_error = None
        return records

    def search(self, query):
        self.state.query = query or ''
        return self.state.search_filter.filter(self.state.query)

    def open(self, index):
        return self.state.gallery.open(index)

    def next(self, index):
        return self.state.gallery.next(index)

    def previous(self, index):
        return self.state.gallery.previous(index)

    def close(self, target):
        return self.state.gallery.close(target)

    def toggle_theme(self):
        self.state.dark_theme = self.theme_store.toggle()
        return self.state.dark_theme

    def set_viewport_width(self, width):
        self.state.gallery.viewport_width = width
        return update_font_size(width)
