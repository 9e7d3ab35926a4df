class XnatError(Exception):
    """Base class for everything this library raises on purpose."""


class LocalFileMissing(XnatError, FileNotFoundError):
    """Raised before any network call when the local file to upload does not exist."""


class TransportError(XnatError):
    """Raised by a session when the server or the connection fails a request."""


class UploadTransportError(XnatError):
    """Raised when the transfer itself fails. Nothing was committed, so nothing is rolled back."""


class UploadIntegrityMismatch(XnatError):
    """Raised when the archive's checksum for a freshly uploaded file does not match the local file.

    The remote copy has already been (best-effort) deleted by the time this is raised.
    """

    def __init__(self, name: str, local_md5: str, remote_md5: str):
        super().__init__(
            f"Upload of {name} failed verification: the archive reports MD5 {remote_md5},"
            f" but the local file has MD5 {local_md5}."
        )
        self.name = name
        self.local_md5 = local_md5
        self.remote_md5 = remote_md5
