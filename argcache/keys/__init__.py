"""
Key generation package.

Turns an ordered list of call arguments into a single comma-joined string
key. Extraction is pluggable per exact argument type through a
``StrategyRegistry``; unregistered types fall back to ``str()``.
"""

from .registry import StrategyRegistry, KeyStrategy
from .strategies import default_strategy, attribute_strategy
from .generator import KeyGenerator, KEY_SEPARATOR

__all__ = [
    "StrategyRegistry",
    "KeyStrategy",
    "default_strategy",
    "attribute_strategy",
    "KeyGenerator",
    "KEY_SEPARATOR",
]
