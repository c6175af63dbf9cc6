"""Exception hierarchy.

Network and parse failures (FetchError, BatchLoadError) are recoverable: the
user can retry the batch. The remaining errors signal a broken contract or a
programming mistake and are meant to propagate.
"""


class PokedexError(Exception):
    pass


class ConfigError(PokedexError):
    pass


class FetchError(PokedexError):
    """A single record could not be fetched or its body was not JSON."""

    def __init__(self, record_id, message):
        super().__init__(f"pokemon {record_id}: {message}")
        self.record_id = record_id


class BatchLoadError(PokedexError):
    def __init__(self, start_id, count, cause):
        self.start_id = start_id
        self.count = count
        self.cause = cause
        self.record_id = getattr(cause, 'record_id', None)
        super().__init__(
            f"batch {start_id}..{start_id + count - 1} failed: {cause}"
        )


class MalformedRecordError(PokedexError, ValueError):
    def __init__(self, record_id, message):
        super().__init__(f"pokemon {record_id}: malformed record: {message}")
        self.record_id = record_id


class CatalogueInvariantError(PokedexError):
    pass


class LoadInProgressError(PokedexError):
    pass
