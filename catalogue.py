import logging
import time
from concurrent.futures import ThreadPoolExecutor

import metrics
from errors import BatchLoadError, CatalogueInvariantError, FetchError, LoadInProgressError

logger = logging.getLogger('pokedex.catalogue')


class Catalogue:
    """Append-only list of records, indexed from 1 in load order.

    Position i always holds the record fetched for source id i.
    """

    def __init__(self):
        self._records = []

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def get(self, index):
        if not 1 <= index <= len(self._records):
            raise IndexError(f"catalogue index {index} out of range 1..{len(self._records)}")
        return self._records[index - 1]

    def items(self):
        """(index, record) pairs in load order."""
        return list(enumerate(self._records, start=1))

    def extend(self, start_id, records):
        if start_id != len(self._records) + 1:
            raise CatalogueInvariantError(
                f"batch starts at {start_id} but the next free index is {len(self._records) + 1}"
            )
        for offset, record in enumerate(records):
            if record.id != start_id + offset:
                raise CatalogueInvariantError(
                    f"record {record.id} found at position {start_id + offset}"
                )
        self._records.extend(records)
        metrics.CATALOGUE_SIZE.set(len(self._records))


class BatchLoader:
    """Loads fixed-size batches of records into a Catalogue.

    A batch is fetched concurrently and is all-or-nothing: if any id fails,
    nothing is appended and the cursor stays where it was.
    """

    def __init__(self, client, catalogue, batch_size=40, render=None,
                 render_delay=0.0, on_loading=None, max_workers=10, sleep=time.sleep):
        self.client = client
        self.catalogue = catalogue
        self.batch_size = batch_size
        self.render = render
        self.render_delay = render_delay
        self.on_loading = on_loading
        self.max_workers = max_workers
        self.cursor = 1
        self.loading = False
        self._sleep = sleep

    def load_batch(self, start_id, count):
        """Fetch ids [start_id, start_id + count) and return them in id order.

        Raises BatchLoadError if any request fails. Malformed records raise
        MalformedRecordError unchanged.
        """
        ids = list(range(start_id, start_id + count))
        logger.info('Fetching batch ids=%s..%s', start_id, start_id + count - 1)
        workers = max(1, min(self.max_workers, count))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.client.fetch_record, record_id) for record_id in ids]
            try:
                records = [future.result() for future in futures]
            except FetchError as exc:
                for future in futures:
                    future.cancel()
                raise BatchLoadError(start_id, count, exc) from exc
        metrics.RECORDS_FETCHED.inc(len(records))
        return records

    def load_initial(self):
        if len(self.catalogue) or self.cursor != 1:
            raise CatalogueInvariantError('initial batch already loaded')
        return self._load()

    def load_more(self):
        return self._load()

    def _load(self):
        if self.loading:
            raise LoadInProgressError(f"a batch starting at {self.cursor} is already loading")
        start_id = self.cursor
        self.loading = True
        self._notify_loading(True)
        try:
            try:
                records = self.load_batch(start_id, self.batch_size)
            except BatchLoadError:
                metrics.BATCH_FAILURES.inc()
                logger.error('Batch starting at %s failed; catalogue left at %d records',
                             start_id, len(self.catalogue))
                raise
            self.catalogue.extend(start_id, records)
            self.cursor = start_id + self.batch_size
            metrics.BATCHES_LOADED.inc()
            logger.info('Loaded %d records; catalogue size=%d next cursor=%d',
                        len(records), len(self.catalogue), self.cursor)
            self._render_sequentially(start_id, records)
            return records
        finally:
            self.loading = False
            self._notify_loading(False)

    def _render_sequentially(self, start_id, records):
        if self.render is None:
            return
        for offset, record in enumerate(records):
            if offset and self.render_delay > 0:
                self._sleep(self.render_delay)
            self.render(start_id + offset, record)

    def _notify_loading(self, active):
        if self.on_loading is not None:
            self.on_loading(active)
