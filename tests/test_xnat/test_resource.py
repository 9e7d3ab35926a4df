from thds.xnat import resource
from thds.xnat.resource import XnatFile

from ._fakes import PARENT, FakeTransport


def test_uri_is_parent_files_name():
    assert XnatFile(PARENT + "/", "a.nii").uri() == PARENT + "/files/a.nii"
    assert XnatFile(PARENT, "a.nii").parent_uri() == PARENT


def test_file_fields_live_in_the_property_store():
    xfile = XnatFile(PARENT, "a.nii")
    xfile.file_format = "NIFTI"
    xfile.file_content = "T1"
    xfile.file_tags = "brain"
    assert xfile.properties.get(resource.FILE_FORMAT) == "NIFTI"
    assert xfile.properties.get(resource.FILE_CONTENT) == "T1"
    assert xfile.properties.get(resource.FILE_TAGS) == "brain"
    assert xfile.properties.get(resource.FILE_NAME) == "a.nii"


def test_erase_deletes_and_clears_exists(transport: FakeTransport):
    xfile = XnatFile(PARENT, "a.nii", remote_exists=True)
    assert xfile.erase(transport)
    assert transport.calls_to("delete") == [(PARENT + "/files/a.nii",)]
    assert not xfile.remote_exists


def test_erase_failure_is_logged_not_raised(transport: FakeTransport, caplog):
    transport.delete_error = RuntimeError("server said no")
    xfile = XnatFile(PARENT, "a.nii", remote_exists=True)
    assert not xfile.erase(transport)
    assert xfile.remote_exists
    assert "Failed to delete" in caplog.text


def test_refresh_exists(transport: FakeTransport):
    xfile = XnatFile(PARENT, "a.nii")
    transport.remote_files.add(xfile.uri())
    assert xfile.refresh_exists(transport)
    assert xfile.remote_exists
