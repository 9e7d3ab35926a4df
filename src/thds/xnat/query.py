"""Building the request for a file upload.

XNAT reads file metadata from the query string of the PUT. The file-specific properties
are stored as file_format/file_content/file_tags but must be sent as format/content/tags,
so they are skipped in the generic pass and appended afterwards.
"""

import typing as ty

from . import resource


class UploadRequest(ty.NamedTuple):
    uri: str
    params: ty.Tuple[ty.Tuple[str, str], ...]

    @property
    def query(self) -> str:
        return "?" + "&".join(f"{key}={value}" for key, value in self.params)

    def __str__(self) -> str:
        return self.uri + self.query

    @staticmethod
    def for_file(xfile: resource.XnatFile) -> "UploadRequest":
        return for_file(xfile)


def upload_params(xfile: resource.XnatFile) -> ty.Iterator[ty.Tuple[str, str]]:
    yield "xsi:type", xfile.schema_type
    for key, value in xfile.properties.items():
        if key not in resource.RESERVED_KEYS:
            yield key, value
    yield "format", xfile.file_format
    yield "content", xfile.file_content
    yield "tags", xfile.file_tags
    if xfile.remote_exists:
        yield "overwrite", "true"
    yield "inbody", "true"  # the file is the request body rather than a multipart form


def for_file(xfile: resource.XnatFile) -> UploadRequest:
    return UploadRequest(xfile.uri(), tuple(upload_params(xfile)))
