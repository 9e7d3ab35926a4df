"""Ordered string properties for XNAT objects.

XNAT metadata is passed to the server as query parameters, and query parameter order is
observable, so this is always backed by an insertion-ordered dict.
"""

import typing as ty


class PropertyStore:
    """An ordered str -> str mapping. Unknown keys read as the empty string."""

    def __init__(self, initial: ty.Iterable[ty.Tuple[str, str]] = ()):
        self._props: ty.Dict[str, str] = dict()
        for key, value in initial:
            self.set(key, value)

    def get(self, key: str, default: str = "") -> str:
        return self._props.get(key, default)

    def set(self, key: str, value: str) -> None:
        # re-setting a key keeps its original position.
        self._props[key] = str(value)

    def remove(self, key: str) -> None:
        self._props.pop(key, None)

    def items(self) -> ty.Iterator[ty.Tuple[str, str]]:
        return iter(list(self._props.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __iter__(self) -> ty.Iterator[str]:
        return iter(list(self._props))

    def __len__(self) -> int:
        return len(self._props)

    def __repr__(self) -> str:
        return f"PropertyStore({list(self._props.items())!r})"
