from pathlib import Path

import pytest

from thds.xnat.resource import XnatFile

from ._fakes import PARENT, FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def local_file(tmp_path: Path) -> Path:
    path = tmp_path / "scan.dcm"
    path.write_bytes(b"not really a DICOM file")
    return path


@pytest.fixture
def xfile(local_file: Path) -> XnatFile:
    return XnatFile(PARENT, "scan.dcm", local_file_path=str(local_file))
