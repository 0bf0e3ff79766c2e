"""
Composite cache key generation from call arguments.
"""

from typing import Any, Optional

from .registry import KeyStrategy, StrategyRegistry
from .strategies import default_strategy

KEY_SEPARATOR = ","
ELEMENT_SEPARATOR = ", "


class KeyGenerator:
    """Generates string cache keys from call arguments.

    Each argument becomes one fragment: ``""`` for ``None``, the output of
    the strategy registered for its exact type, or ``str(argument)``.
    Fragments are joined with ``","`` in argument order, so no arguments
    yield ``""`` and ``(None, None)`` yields ``","``.

    Fragments are not escaped. Arguments whose text contains a comma can
    collide with a longer argument list, e.g. ``("a,b",)`` and
    ``("a", "b")`` both give ``"a,b"``. Use a separate namespace per cached
    operation, or register a strategy that avoids commas, where this matters.

    Built-in containers without a registered strategy are rendered from
    their elements' fragments rather than their ``repr``: ``[1, 2]``,
    ``(1, 2)``, ``{1, 2}`` for sets and ``{k=v}`` for dicts, with set
    members and dict items sorted by fragment so the key does not depend
    on hash order.

    The call target and operation are accepted for the interception layer
    but do not contribute to the key; keys are shared across receivers and
    operations, and operations are told apart by namespace.
    """

    def __init__(
        self,
        registry: Optional[StrategyRegistry] = None,
        fallback: KeyStrategy = default_strategy,
    ):
        self._registry = registry if registry is not None else StrategyRegistry()
        self._fallback = fallback

    @property
    def registry(self) -> StrategyRegistry:
        return self._registry

    def register_strategy(self, type_: type, strategy: KeyStrategy) -> None:
        """Register a strategy for ``type_`` with the underlying registry."""
        self._registry.register(type_, strategy)

    def generate(self, target: Any, operation: Any, *args: Any) -> str:
        """Return the composite key for ``args``."""
        return KEY_SEPARATOR.join(self._fragment(arg) for arg in args)

    def _fragment(self, value: Any) -> str:
        """Get the key fragment for one argument."""
        if value is None:
            return ""
        type_ = type(value)
        strategy = self._registry.lookup(type_)
        if strategy is not None:
            return strategy(value)
        if type_ is list:
            return "[" + ELEMENT_SEPARATOR.join(self._fragment(item) for item in value) + "]"
        if type_ is tuple:
            return "(" + ELEMENT_SEPARATOR.join(self._fragment(item) for item in value) + ")"
        if type_ is set or type_ is frozenset:
            return "{" + ELEMENT_SEPARATOR.join(sorted(self._fragment(item) for item in value)) + "}"
        if type_ is dict:
            items = sorted(f"{self._fragment(k)}={self._fragment(v)}" for k, v in value.items())
            return "{" + ELEMENT_SEPARATOR.join(items) + "}"
        return self._fallback(value)
