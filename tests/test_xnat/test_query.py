import pytest

from thds.xnat.query import UploadRequest
from thds.xnat.resource import XnatFile

from ._fakes import PARENT


@pytest.fixture
def described_file() -> XnatFile:
    xfile = XnatFile(PARENT, "scan.dcm")
    xfile.file_tags = "raw"
    xfile.properties.set("zeta", "1")
    xfile.file_format = "DICOM"
    xfile.properties.set("alpha", "2")
    xfile.file_content = "T1_RAW"
    return xfile


def test_generic_properties_in_store_order_then_fixed_trailer(described_file: XnatFile):
    request = UploadRequest.for_file(described_file)
    assert request.uri == PARENT + "/files/scan.dcm"
    assert request.params == (
        ("xsi:type", "xnat:abstractResource"),
        ("Name", "scan.dcm"),
        ("zeta", "1"),
        ("alpha", "2"),
        ("format", "DICOM"),
        ("content", "T1_RAW"),
        ("tags", "raw"),
        ("inbody", "true"),
    )


def test_query_string_is_bit_exact(described_file: XnatFile):
    assert str(UploadRequest.for_file(described_file)) == (
        PARENT
        + "/files/scan.dcm?xsi:type=xnat:abstractResource&Name=scan.dcm&zeta=1&alpha=2"
        + "&format=DICOM&content=T1_RAW&tags=raw&inbody=true"
    )


def test_reserved_keys_are_never_sent_under_their_stored_names(described_file: XnatFile):
    keys = [k for k, _ in UploadRequest.for_file(described_file).params]
    assert not {"file_tags", "file_format", "file_content"} & set(keys)
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize("remote_exists", [True, False])
def test_overwrite_only_when_the_file_already_exists(described_file: XnatFile, remote_exists: bool):
    described_file.remote_exists = remote_exists
    params = UploadRequest.for_file(described_file).params
    assert (("overwrite", "true") in params) is remote_exists
    if remote_exists:
        assert params[-2:] == (("overwrite", "true"), ("inbody", "true"))
    assert params[-1] == ("inbody", "true")


def test_empty_file_fields_are_still_sent():
    params = dict(UploadRequest.for_file(XnatFile(PARENT, "a")).params)
    assert params["format"] == params["content"] == params["tags"] == ""
