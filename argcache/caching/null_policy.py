"""
Null key and null value shaping for backing stores.

Most key-value stores cannot hold a null key or a null value, and a store
that returns "nothing" for a missing entry cannot tell it apart from a
stored ``None``. Every namespaced cache maps both through the sentinels
defined here before touching the store, and maps them back on the way out.

Known limitation: ``NULL_KEY`` is an ordinary string. A real key equal to
it addresses the same entry as the ``None`` key.
"""

from typing import Any, Optional

NULL_KEY = "\x00argcache:null-key\x00"


class NullValue:
    """Marker stored in place of ``None``.

    There is a single instance, ``NULL_VALUE``. Pickling it stores a
    reference to the module attribute, so it comes back from a remote store
    as the same instance and identity checks keep working.
    """

    _instance: Optional["NullValue"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return "NULL_VALUE"

    def __repr__(self) -> str:
        return "NULL_VALUE"

    def __bool__(self) -> bool:
        return False


NULL_VALUE = NullValue()


def to_store_key(key: Any) -> str:
    """Map a caller key to the key used in the store."""
    if key is None:
        return NULL_KEY
    return key if isinstance(key, str) else str(key)


def to_store_value(value: Any) -> Any:
    """Map a caller value to the value written to the store."""
    if value is None:
        return NULL_VALUE
    return value


def from_store_value(raw: Any) -> Any:
    """Map a stored value back to what the caller put."""
    if raw is NULL_VALUE:
        return None
    return raw
