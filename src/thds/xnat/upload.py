"""API for uploading a file to an XNAT archive and verifying what arrived.

An upload attempt goes Validating -> Transmitting -> CatalogFetch -> ChecksumCompare and
ends either Done or RolledBack. Nothing is retried here; every failure ends the attempt
and is raised to the caller.
"""

import os

from thds.core import log

from . import catalog, md5
from .errors import LocalFileMissing, UploadIntegrityMismatch, UploadTransportError
from .query import UploadRequest
from .resource import XnatFile
from .transport import Transport

logger = log.getLogger(__name__)


def _validate(xfile: XnatFile) -> None:
    if not xfile.name:
        raise ValueError(f"Cannot upload a file without a name: {xfile!r}")
    if not xfile.local_file_path or not os.path.isfile(xfile.local_file_path):
        raise LocalFileMissing(f"Error uploading file! File {xfile.local_file_path!r} does not exist!")


def _verify(xfile: XnatFile, transport: Transport) -> None:
    records = catalog.fetch_catalog(transport, xfile.parent_uri())
    remote_md5 = catalog.find_remote_checksum(records, xfile.name)
    if remote_md5 == catalog.MISSING_CHECKSUM:
        logger.warning(
            "Could not validate file upload! No checksum in the catalog of %s", xfile.parent_uri()
        )
        return

    try:
        local_md5 = md5.hex_md5_file(xfile.local_file_path)
    except OSError as oserr:
        logger.warning("Could not validate file upload! Local file is unreadable: %r", oserr)
        return

    if local_md5 != remote_md5:
        logger.error(
            "Checksum mismatch after upload - removing the corrupted remote copy",
            local_md5=local_md5,
            remote_md5=remote_md5,
        )
        xfile.erase(transport)
        raise UploadIntegrityMismatch(xfile.name, local_md5, remote_md5)

    logger.debug("Remote checksum matches", md5=local_md5)


def upload(xfile: XnatFile, transport: Transport) -> UploadRequest:
    """Uploads the file at `xfile.local_file_path` into its parent resource.

    If the file is already known to exist remotely (`xfile.remote_exists`), it is
    overwritten.

    After the transfer, the parent's catalog is consulted for the MD5 of the new file and
    compared with the local file. On a mismatch the remote copy is deleted and
    UploadIntegrityMismatch is raised. If the catalog has no checksum for the file (or the
    local file can no longer be read), a warning is logged and the upload counts as a
    success.
    """
    _validate(xfile)
    request = UploadRequest.for_file(xfile)

    with log.logger_context(xnat_file=xfile.name):
        logger.info("Uploading %s to %s", xfile.local_file_path, request.uri)
        logger.debug("Upload query %s", request.query)
        try:
            transport.upload(xfile.local_file_path, str(request))
        except Exception as err:
            raise UploadTransportError(
                f"Upload of {xfile.local_file_path} to {request.uri} failed"
            ) from err
        xfile.remote_exists = True  # cleared again only by a successful rollback

        _verify(xfile, transport)
        logger.info("Uploaded %s", request.uri)

    return request
