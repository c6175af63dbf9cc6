import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import requests

from config import DEFAULT_API_BASE
from errors import FetchError, MalformedRecordError

logger = logging.getLogger('pokedex.client')

# PokeAPI stat names in the order the records are expected to carry them
STAT_NAMES = ('hp', 'attack', 'defense', 'special-attack', 'special-defense', 'speed')


def capitalize_name(name):
    return name[:1].upper() + name[1:]


@dataclass(frozen=True)
class Record:
    id: int
    name: str
    image_url: Optional[str]
    experience: Optional[int]
    types: Tuple[str, ...]
    height: int
    weight: int
    stats: Tuple[int, int, int, int, int, int]

    @property
    def display_name(self):
        return capitalize_name(self.name)

    @property
    def primary_type(self):
        return self.types[0]

    @property
    def secondary_type(self):
        return self.types[1] if len(self.types) > 1 else None

    @property
    def height_m(self):
        return self.height / 10

    @property
    def weight_kg(self):
        return self.weight / 10


def _require(payload, key, kind, record_id):
    if not isinstance(payload, dict) or key not in payload:
        raise MalformedRecordError(record_id, f"missing field {key!r}")
    value = payload[key]
    # bool is an int subclass; PokeAPI never sends one for these fields
    if not isinstance(value, kind) or isinstance(value, bool):
        raise MalformedRecordError(
            record_id, f"field {key!r} has type {type(value).__name__}"
        )
    return value


def _parse_types(payload, record_id):
    entries = _require(payload, 'types', list, record_id)
    if not 1 <= len(entries) <= 2:
        raise MalformedRecordError(record_id, f"expected 1 or 2 types, got {len(entries)}")
    names = []
    for entry in entries:
        type_info = _require(entry, 'type', dict, record_id)
        names.append(_require(type_info, 'name', str, record_id))
    return tuple(names)


def _parse_stats(payload, record_id):
    entries = _require(payload, 'stats', list, record_id)
    if len(entries) != len(STAT_NAMES):
        raise MalformedRecordError(
            record_id, f"expected {len(STAT_NAMES)} stats, got {len(entries)}"
        )
    values = []
    for expected, entry in zip(STAT_NAMES, entries):
        values.append(_require(entry, 'base_stat', int, record_id))
        # Named entries must follow the fixed order; unnamed ones are trusted by position
        stat_name = (entry.get('stat') or {}).get('name')
        if stat_name is not None and stat_name != expected:
            raise MalformedRecordError(
                record_id, f"stat {stat_name!r} where {expected!r} was expected"
            )
    return tuple(values)


def _parse_image(payload):
    sprites = payload.get('sprites') or {}
    home = (sprites.get('other') or {}).get('home') or {}
    return home.get('front_default')


def parse_record(record_id, payload):
    """Validate a /pokemon/{id} payload and turn it into a Record.

    Raises MalformedRecordError when a field the app relies on is missing or
    has the wrong shape. The image URL is optional and may be None.
    """
    experience = payload.get('base_experience') if isinstance(payload, dict) else None
    if experience is not None and (not isinstance(experience, int) or isinstance(experience, bool)):
        raise MalformedRecordError(record_id, "field 'base_experience' is not an integer")
    return Record(
        id=record_id,
        name=_require(payload, 'name', str, record_id),
        image_url=_parse_image(payload),
        experience=experience,
        types=_parse_types(payload, record_id),
        height=_require(payload, 'height', int, record_id),
        weight=_require(payload, 'weight', int, record_id),
        stats=_parse_stats(payload, record_id),
    )


class PokeAPIClient:
    """Fetches single pokemon records from PokeAPI by numeric id."""

    def __init__(self, base_url=DEFAULT_API_BASE, timeout=10.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, record_id):
        return f"{self.base_url}/pokemon/{record_id}"

    def fetch_payload(self, record_id):
        url = self.url_for(record_id)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Request failed url=%s error=%s", url, exc)
            raise FetchError(record_id, str(exc)) from exc
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Invalid JSON url=%s", url)
            raise FetchError(record_id, 'response body is not valid JSON') from exc

    def fetch_record(self, record_id):
        return parse_record(record_id, self.fetch_payload(record_id))

    def close(self):
        self.session.close()
