import pytest

from catalogue import Catalogue
from conftest import make_record
from gallery import DismissTarget, GalleryNavigator


@pytest.fixture
def navigator():
    catalogue = Catalogue()
    catalogue.extend(1, [make_record(i, types=('water', 'ice')) for i in range(1, 41)])
    return GalleryNavigator(catalogue, viewport_width=1024)


def test_starts_closed(navigator):
    assert navigator.is_open is False
    assert navigator.open_index is None


def test_open_builds_detail_view(navigator):
    view = navigator.open(7)
    assert navigator.open_index == 7
    assert view.display_name == 'Squirtle'
    assert view.background == 'bg-water'
    assert view.types == ('water', 'ice')
    assert view.height_m == 1.0
    assert view.weight_kg == 10.0
    assert view.chart.values == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize('index', [0, 41, -1])
def test_open_out_of_range_raises(navigator, index):
    with pytest.raises(IndexError):
        navigator.open(index)
    assert navigator.is_open is False


def test_next_wraps_to_first(navigator):
    navigator.open(40)
    assert navigator.next(40).index == 1
    assert navigator.open_index == 1


def test_previous_wraps_to_last(navigator):
    navigator.open(1)
    assert navigator.previous(1).index == 40
    assert navigator.open_index == 40


def test_next_and_previous_step_inside_range(navigator):
    assert navigator.next(10).index == 11
    assert navigator.previous(10).index == 9


def test_content_click_does_not_close(navigator):
    navigator.open(3)
    assert navigator.close(DismissTarget.CONTENT) is False
    assert navigator.open_index == 3


@pytest.mark.parametrize('target', [DismissTarget.BACKDROP, DismissTarget.CLOSE_CONTROL])
def test_backdrop_and_close_control_close(navigator, target):
    navigator.open(3)
    assert navigator.close(target) is True
    assert navigator.is_open is False
    assert navigator.view is None


def test_chart_factory_receives_viewport_width():
    calls = []
    catalogue = Catalogue()
    catalogue.extend(1, [make_record(1)])
    navigator = GalleryNavigator(catalogue, chart_factory=lambda r, w: calls.append((r.id, w)),
                                 viewport_width=500)
    navigator.open(1)
    assert calls == [(1, 500)]
