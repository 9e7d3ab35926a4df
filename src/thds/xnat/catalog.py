"""Looking up a file's checksum in its parent resource's catalog.

Older XNAT servers (1.6.4 and before) do not return an MD5 from the upload itself, so the
only way to learn what the server stored is to list the parent's catalog afterwards.
"""

import typing as ty

from thds.core import log

from .transport import Transport

logger = log.getLogger(__name__)

CatalogRecord = ty.Mapping[str, str]
MISSING_CHECKSUM = "0"


def fetch_catalog(transport: Transport, uri: str) -> ty.List[CatalogRecord]:
    """Never cached - the catalog is expected to have just changed."""
    records = transport.sync_fetch(transport.get(uri))
    logger.debug("Fetched %d catalog records for %s", len(records), uri)
    return list(records)


def find_remote_checksum(records: ty.Sequence[CatalogRecord], name: str) -> str:
    # newly added files are appended to the catalog, so search from the end.
    for record in reversed(records):
        if name in record:
            return str(record[name])
    return MISSING_CHECKSUM
