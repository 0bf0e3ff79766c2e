"""
Per-type key strategy registry.
"""

import threading
from typing import Any, Callable, Dict, List, Optional

from shared.errors import InvalidArgumentError
from shared.logging import get_logger

KeyStrategy = Callable[[Any], str]


class StrategyRegistry:
    """Maps exact argument types to key extraction strategies.

    Lookups never walk the MRO: a strategy registered for ``int`` is not
    used for ``bool``. Registration replaces the mapping with an updated
    copy under a lock, so lookups read a stable snapshot without locking.
    """

    def __init__(self):
        self.logger = get_logger("argcache.keys.registry")
        self._lock = threading.Lock()
        self._strategies: Dict[type, KeyStrategy] = {}

    def register(self, type_: type, strategy: KeyStrategy) -> None:
        """Register ``strategy`` for arguments whose type is exactly ``type_``."""
        if type_ is None:
            raise InvalidArgumentError("Strategy type must be set")
        if not isinstance(type_, type):
            raise InvalidArgumentError("Strategy type must be a class", {"type": repr(type_)})
        if strategy is None:
            raise InvalidArgumentError("Strategy must be set", {"type": type_.__qualname__})
        if not callable(strategy):
            raise InvalidArgumentError("Strategy must be callable", {"type": type_.__qualname__})

        with self._lock:
            strategies = dict(self._strategies)
            replaced = type_ in strategies
            strategies[type_] = strategy
            self._strategies = strategies

        self.logger.debug("Registered key strategy", type=type_.__qualname__, replaced=replaced)

    def lookup(self, type_: type) -> Optional[KeyStrategy]:
        """Return the strategy for exactly ``type_``, or None."""
        return self._strategies.get(type_)

    def registered_types(self) -> List[type]:
        return list(self._strategies)

    def __contains__(self, type_: type) -> bool:
        return type_ in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)
