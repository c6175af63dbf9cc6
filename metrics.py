import logging
import threading

from prometheus_client import Counter, Gauge, start_http_server

logger = logging.getLogger('pokedex.metrics')

RECORDS_FETCHED = Counter('pokedex_records_fetched_total', 'Pokemon records fetched from PokeAPI')
BATCHES_LOADED = Counter('pokedex_batches_loaded_total', 'Batches appended to the catalogue')
BATCH_FAILURES = Counter('pokedex_batch_failures_total', 'Batches that failed and were discarded')
CATALOGUE_SIZE = Gauge('pokedex_catalogue_size', 'Records currently held in the catalogue')

_server_lock = threading.Lock()
_server_port = None


def start_metrics_server(port):
    """Start the Prometheus exporter once per process. Returns True if it was started by this call."""
    global _server_port
    if port is None:
        return False
    with _server_lock:
        if _server_port is not None:
            return False
        start_http_server(port)
        _server_port = port
    logger.info('Prometheus metrics exposed on port %s', port)
    return True
