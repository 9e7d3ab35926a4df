import typing as ty

from thds.core import log

from .properties import PropertyStore
from .transport import Transport

logger = log.getLogger(__name__)

FILE_NAME = "Name"
FILE_TAGS = "file_tags"
FILE_FORMAT = "file_format"
FILE_CONTENT = "file_content"
RESERVED_KEYS: ty.Final = (FILE_TAGS, FILE_FORMAT, FILE_CONTENT)
# these are sent under different query keys (tags, format, content) on upload.

DEFAULT_SCHEMA_TYPE = "xnat:abstractResource"


class RemoteResource(ty.Protocol):
    def uri(self) -> str:
        ...

    def parent_uri(self) -> str:
        ...


class XnatFile:
    """A single file inside an XNAT resource (a scan's DICOM folder, say).

    Everything except the local path lives in the ordered property store, so arbitrary
    extra XNAT metadata set via `properties.set` travels with the upload.
    """

    def __init__(
        self,
        parent_uri: str,
        name: str = "",
        *,
        schema_type: str = DEFAULT_SCHEMA_TYPE,
        local_file_path: str = "",
        remote_exists: bool = False,
    ):
        self._parent_uri = parent_uri.rstrip("/")
        self.schema_type = schema_type
        self.local_file_path = local_file_path
        self.remote_exists = remote_exists
        self.properties = PropertyStore()
        if name:
            self.name = name

    @property
    def name(self) -> str:
        return self.properties.get(FILE_NAME)

    @name.setter
    def name(self, name: str) -> None:
        self.properties.set(FILE_NAME, name)

    @property
    def file_format(self) -> str:
        return self.properties.get(FILE_FORMAT)

    @file_format.setter
    def file_format(self, file_format: str) -> None:
        self.properties.set(FILE_FORMAT, file_format)

    @property
    def file_content(self) -> str:
        return self.properties.get(FILE_CONTENT)

    @file_content.setter
    def file_content(self, file_content: str) -> None:
        self.properties.set(FILE_CONTENT, file_content)

    @property
    def file_tags(self) -> str:
        return self.properties.get(FILE_TAGS)

    @file_tags.setter
    def file_tags(self, file_tags: str) -> None:
        self.properties.set(FILE_TAGS, file_tags)

    def parent_uri(self) -> str:
        return self._parent_uri

    def uri(self) -> str:
        return f"{self._parent_uri}/files/{self.name}"

    def refresh_exists(self, transport: Transport) -> bool:
        self.remote_exists = transport.exists(self.uri())
        return self.remote_exists

    def erase(self, transport: Transport) -> bool:
        """Best effort - a failure to delete is logged, never raised."""
        try:
            transport.delete(self.uri())
        except Exception as err:
            logger.warning("Failed to delete %s from the archive: %r", self.uri(), err)
            return False
        logger.info("Deleted %s from the archive", self.uri())
        self.remote_exists = False
        return True

    def __repr__(self) -> str:
        return f"XnatFile({self.uri()!r}, local_file_path={self.local_file_path!r})"
