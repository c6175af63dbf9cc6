import time

import pytest

from errors import FetchError
from pokeapi_client import STAT_NAMES, Record

NAMES = {1: 'bulbasaur', 4: 'charmander', 7: 'squirtle', 25: 'pikachu'}


def make_payload(record_id=1, name=None, types=('grass', 'poison'),
                 stats=(45, 49, 49, 65, 65, 45), image='https://img.example/1.png'):
    return {
        'name': name or NAMES.get(record_id, f"mon{record_id}"),
        'base_experience': 64,
        'height': 7,
        'weight': 69,
        'types': [{'slot': i + 1, 'type': {'name': t}} for i, t in enumerate(types)],
        'stats': [{'base_stat': v, 'stat': {'name': n}} for n, v in zip(STAT_NAMES, stats)],
        'sprites': {'other': {'home': {'front_default': image}}},
    }


def make_record(record_id, name=None, types=('normal',), stats=(1, 2, 3, 4, 5, 6)):
    return Record(
        id=record_id,
        name=name or NAMES.get(record_id, f"mon{record_id}"),
        image_url=f"https://img.example/{record_id}.png",
        experience=100,
        types=tuple(types),
        height=10,
        weight=100,
        stats=tuple(stats),
    )


class FakeClient:
    """Stands in for PokeAPIClient; later ids finish first so completion order is scrambled."""

    def __init__(self, fail_ids=(), names=None, jitter=0.002):
        self.fail_ids = set(fail_ids)
        self.names = names or {}
        self.jitter = jitter
        self.requested = []

    def fetch_record(self, record_id):
        self.requested.append(record_id)
        time.sleep(self.jitter * (record_id % 5))
        if record_id in self.fail_ids:
            raise FetchError(record_id, 'connection refused')
        return make_record(record_id, name=self.names.get(record_id))


@pytest.fixture
def fake_client():
    return FakeClient()
