from thds import core

from . import catalog, conf, errors, md5, query, resource  # noqa: F401
from .download import download  # noqa: F401
from .errors import (  # noqa: F401
    LocalFileMissing,
    TransportError,
    UploadIntegrityMismatch,
    UploadTransportError,
    XnatError,
)
from .properties import PropertyStore  # noqa: F401
from .query import UploadRequest  # noqa: F401
from .resource import RemoteResource, XnatFile  # noqa: F401
from .session import XnatSession  # noqa: F401
from .transport import JobHandle, Transport  # noqa: F401
from .upload import upload  # noqa: F401

__version__ = core.meta.get_version(__name__)
__basepackage__ = __name__
