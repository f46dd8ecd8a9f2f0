"""
Dictionary-like object with attribute access and dotted-path lookup.

DotDict backs the configuration object: nested mappings become nested
DotDict instances, so ``config.maven.surefire_version`` and
``config.get("maven.surefire_version")`` are equivalent.
"""

import builtins
from collections.abc import ItemsView, Iterator, KeysView
from typing import Any


class DotDict:
    """
    Dictionary-like object with attribute-style access and nested structure support.
    """

    # Keys that would shadow methods and are not allowed
    _RESERVED_KEYS = frozenset({"set", "clear", "to_dict", "get", "has"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """
        Set multiple key-value pairs, converting nested dicts to DotDict.

        Returns:
            self: For method chaining
        """
        for key, val in kwargs.items():
            self._set_item(key, val)
        return self

    def _set_item(self, key: Any, val: Any) -> None:
        if not isinstance(key, str):
            key = str(key)

        if key in self._RESERVED_KEYS:
            raise ValueError(
                f"Key '{key}' is reserved and cannot be used (would shadow method)"
            )

        if isinstance(val, dict):
            setattr(self, key, DotDict(**val))
        elif isinstance(val, list):
            setattr(self, key, [self._map_entry(v) for v in val])
        else:
            setattr(self, key, val)

    @staticmethod
    def _map_entry(entry: Any) -> Any:
        if isinstance(entry, dict):
            return DotDict(**entry)
        return entry

    def clear(self) -> None:
        """Remove all public keys; private attributes are kept."""
        for k in [k for k in self.__dict__ if not k.startswith("_")]:
            delattr(self, k)

    def to_dict(self) -> builtins.dict[str, Any]:
        """
        Recursively convert to plain dicts and lists.

        Private attributes (leading underscore) are not part of the data.
        """
        result: dict[str, Any] = {}
        for key, val in self.items():
            if isinstance(val, DotDict):
                result[key] = val.to_dict()
            elif isinstance(val, list):
                result[key] = [
                    item.to_dict() if isinstance(item, DotDict) else item
                    for item in val
                ]
            else:
                result[key] = val
        return result

    def keys(self) -> KeysView[str]:
        return self._public().keys()

    def items(self) -> ItemsView[str, Any]:
        return self._public().items()

    def _public(self) -> builtins.dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def __contains__(self, key: Any) -> bool:
        return key in self._public()

    def __iter__(self) -> Iterator[str]:
        return iter(self._public())

    def __getitem__(self, key: str) -> Any:
        return self._public().get(key)

    def __setitem__(self, key: str, val: Any) -> None:
        self._set_item(key, val)

    def __len__(self) -> int:
        return len(self._public())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"

    def has(self, path: str) -> bool:
        """
        Check if a dot-separated path exists.

        Args:
            path: Dot-separated path (e.g., "maven.surefire_version")
        """
        sentinel = object()
        return self.get(path, sentinel) is not sentinel

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get value by dot-separated path.

        Follows dict.get() semantics: returns default if the path is not found.

        Args:
            path: Dot-separated path to get (e.g., "cube.version")
            default: Value returned when the path is missing
        """
        if not path:
            return default

        cur: Any = self
        for item in [p for p in path.split(".") if p]:
            if not isinstance(cur, DotDict) or item not in cur:
                return default
            cur = cur[item]
        return cur


class DotDictPathNotFoundError(Exception):
    """Raised when a referenced path is not found in a DotDict."""

    def __init__(self, obj: DotDict, path: str) -> None:
        self.obj = obj
        self.path = path
        super().__init__(f"Path '{path}' not found")
