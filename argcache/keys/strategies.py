"""
Key extraction strategies.
"""

from typing import Any

from shared.errors import ExtractionError, InvalidArgumentError

from .registry import KeyStrategy

ATTRIBUTE_SEPARATOR = ":"


def default_strategy(value: Any) -> str:
    """Fallback strategy: the value's own string representation.

    Argument types without a registered strategy should define ``__str__``
    so that equal values render to equal strings.
    """
    return str(value)


def attribute_strategy(*names: str) -> KeyStrategy:
    """Build a strategy rendering the named attributes of an argument.

    Intended for classes whose ``__str__`` is not usable as a key and
    cannot be changed (third-party types, for instance). Attribute values
    are rendered with ``str()`` and joined with ``":"``.
    """
    if not names:
        raise InvalidArgumentError("attribute_strategy needs at least one attribute name")

    def strategy(value: Any) -> str:
        parts = []
        for name in names:
            try:
                attribute = getattr(value, name)
            except AttributeError as exc:
                raise ExtractionError(
                    f"{type(value).__qualname__} has no attribute '{name}'",
                    {"type": type(value).__qualname__, "attribute": name},
                ) from exc
            parts.append("" if attribute is None else str(attribute))
        return ATTRIBUTE_SEPARATOR.join(parts)

    strategy.__name__ = f"attribute_strategy({', '.join(names)})"
    return strategy
