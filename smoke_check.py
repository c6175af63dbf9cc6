"""Lightweight smoke test: fetch and parse pokemon #1 from the live API.
This avoids starting Streamlit UI and only checks that the client imports and the HTTP call works.
"""
from config import Settings
from pokeapi_client import PokeAPIClient

if __name__ == '__main__':
    settings = Settings.from_env()
    client = PokeAPIClient(settings.api_base, timeout=settings.http_timeout)
    record = client.fetch_record(1)
    if record.id == 1 and len(record.stats) == 6:
        print('fetch_record OK:', record.display_name, record.types, record.stats)
    else:
        raise SystemExit('fetch_record returned unexpected record')
