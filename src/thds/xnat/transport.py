"""What the file model needs from a connection to an XNAT server.

XnatSession is the real implementation; tests use an in-memory fake.
"""

import typing as ty
import uuid

from thds.core.types import StrOrPath

JobHandle = uuid.UUID
# an opaque ticket for a request submitted with `get` and awaited with `sync_fetch`.


class Transport(ty.Protocol):
    def upload(self, local_path: StrOrPath, request_uri: str) -> None:
        """Send the local file as the body of the given request (path plus query)."""
        ...

    def get(self, uri: str) -> JobHandle:
        """Submit a listing request without waiting for it."""
        ...

    def sync_fetch(self, handle: JobHandle) -> ty.List[ty.Dict[str, str]]:
        """Block until the job is done and return its records, in server order."""
        ...

    def download(self, dest: StrOrPath, uri: str) -> None:
        ...

    def delete(self, uri: str) -> None:
        ...

    def exists(self, uri: str) -> bool:
        ...
