import pytest

from app_state import PokedexController
from conftest import FakeClient
from config import Settings
from errors import BatchLoadError
from gallery import DismissTarget
from stat_chart import CHART_DEFAULTS
from theme import ThemeStore


@pytest.fixture
def settings(tmp_path):
    return Settings(theme_file=str(tmp_path / 'theme.json'), batch_size=40, viewport_width=1024)


def make_controller(settings, client=None, **kwargs):
    return PokedexController(settings, client=client or FakeClient(jitter=0),
                             theme_store=ThemeStore(settings.theme_file), **kwargs)


def test_start_loads_forty_and_reads_theme(settings):
    ThemeStore(settings.theme_file).save(True)
    controller = make_controller(settings)
    controller.start()
    assert len(controller.state.catalogue) == 40
    assert controller.state.dark_theme is True
    assert controller.state.last_error is None


def test_wraparound_scenario(settings):
    controller = make_controller(settings)
    controller.start()
    controller.open(40)
    assert controller.next(40).index == 1
    controller.open(1)
    assert controller.previous(1).index == 40


def test_failed_load_is_recorded_and_retry_succeeds(settings):
    client = FakeClient(fail_ids={45}, jitter=0)
    controller = make_controller(settings, client=client)
    controller.start()
    assert controller.load_more() == []
    assert isinstance(controller.state.last_error, BatchLoadError)
    assert len(controller.state.catalogue) == 40
    assert controller.state.loader.cursor == 41

    client.fail_ids.clear()
    appended = controller.retry()
    assert len(appended) == 40
    assert controller.state.last_error is None
    assert controller.state.loader.cursor == 81


def test_retry_after_failed_start_loads_initial_batch(settings):
    client = FakeClient(fail_ids={1}, jitter=0)
    controller = make_controller(settings, client=client)
    controller.start()
    assert len(controller.state.catalogue) == 0
    client.fail_ids.clear()
    controller.retry()
    assert len(controller.state.catalogue) == 40


def test_retry_without_error_is_noop(settings):
    controller = make_controller(settings)
    controller.start()
    assert controller.retry() == []
    assert len(controller.state.catalogue) == 40


def test_load_more_clears_query(settings):
    controller = make_controller(settings)
    controller.start()
    controller.search('bulb')
    controller.load_more()
    assert controller.state.query == ''


def test_search_over_loaded_records(settings):
    controller = make_controller(settings, client=FakeClient(names={25: 'pikachu'}, jitter=0))
    controller.start()
    assert controller.search('PIK').visible_ids == (25,)
    assert len(controller.search('PI').visible_ids) == 40


def test_renderer_receives_each_card(settings):
    seen = []
    controller = make_controller(settings, render=lambda index, record: seen.append(index))
    controller.start()
    assert seen == list(range(1, 41))


def test_close_and_toggle_theme(settings):
    controller = make_controller(settings)
    controller.start()
    controller.open(2)
    assert controller.close(DismissTarget.CONTENT) is False
    assert controller.close(DismissTarget.BACKDROP) is True
    assert controller.toggle_theme() is True
    assert ThemeStore(settings.theme_file).load() is True


def test_viewport_width_updates_chart_font(settings):
    saved = dict(CHART_DEFAULTS)
    try:
        controller = make_controller(settings)
        assert controller.set_viewport_width(500) == 16
        assert controller.state.gallery.viewport_width == 500
    finally:
        CHART_DEFAULTS.update(saved)
