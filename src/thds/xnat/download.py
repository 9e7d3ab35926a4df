from pathlib import Path

from thds.core import log
from thds.core.types import StrOrPath

from .resource import XnatFile
from .transport import Transport

logger = log.getLogger(__name__)


def download(xfile: XnatFile, transport: Transport, dest: StrOrPath) -> Path:
    """Fetches the archive's copy of the file to `dest`.

    Unlike upload, no checksum is verified here.
    """
    if not xfile.name:
        raise ValueError(f"Cannot download a file without a name: {xfile!r}")
    logger.info("Downloading %s to %s", xfile.uri(), dest)
    transport.download(dest, xfile.uri())
    return Path(dest)
