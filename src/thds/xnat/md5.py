import hashlib
from pathlib import Path

from thds.core.hashing import hash_using
from thds.core.types import StrOrPath


def hex_md5_str(string: str) -> str:
    return hash_using(string.encode(), hashlib.md5()).hexdigest()


def hex_md5_file(path: StrOrPath) -> str:
    """Hashes in chunks; raises OSError if the file cannot be opened."""
    return hash_using(Path(path), hashlib.md5()).hexdigest()
