import hashlib

import pytest

from thds.xnat import md5

from ._fakes import HW


def test_file_md5_is_lowercase_hex():
    assert md5.hex_md5_file(HW) == hashlib.md5(HW.read_bytes()).hexdigest()
    assert md5.hex_md5_file(str(HW)) == md5.hex_md5_str("hello world\n")


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        md5.hex_md5_file(tmp_path / "nope")
