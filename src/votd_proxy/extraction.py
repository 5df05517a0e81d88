"""Field extraction from upstream JSON documents.

The YouVersion API has returned the same data in several shapes over time,
so each value is read with an ordered tuple of strategies. The first
strategy that yields a present value wins.

A value is *present* when it is a non-empty string, or an integer (not a
bool), which is converted to ``str``. Every getter tolerates the wrong shape
(non-dict, empty list, missing key) by returning ``None``.

Example:
    ```python
    from votd_proxy.extraction import extract_passage_id

    extract_passage_id({"data": [{"passage_id": "MAT.15.13"}]})  # "MAT.15.13"
    extract_passage_id({"passage_id": "JHN.3.16"})  # "JHN.3.16"
    extract_passage_id({})  # None
    ```
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

TEXT_UNAVAILABLE = "Text unavailable"

Getter = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldStrategy:
    """A named way of reading one value out of a decoded JSON document.

    Attributes:
        name: Dotted path shown in logs and tests, e.g. "data[0].passage_id"
        getter: Callable returning the raw value or None
    """

    name: str
    getter: Getter

    def __call__(self, document: Any) -> str | None:
        return _present(self.getter(document))


def _present(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def root_field(name: str) -> FieldStrategy:
    """Read ``document[name]``."""

    def getter(document: Any) -> Any:
        return document.get(name) if isinstance(document, dict) else None

    return FieldStrategy(name, getter)


def nested_field(parent: str, name: str) -> FieldStrategy:
    """Read ``document[parent][name]`` where ``parent`` is an object."""

    def getter(document: Any) -> Any:
        if not isinstance(document, dict):
            return None
        child = document.get(parent)
        return child.get(name) if isinstance(child, dict) else None

    return FieldStrategy(f"{parent}.{name}", getter)


def first_item_field(parent: str, name: str) -> FieldStrategy:
    """Read ``document[parent][0][name]`` where ``parent`` is an array of objects."""

    def getter(document: Any) -> Any:
        if not isinstance(document, dict):
            return None
        items = document.get(parent)
        if not isinstance(items, list) or not items:
            return None
        first = items[0]
        return first.get(name) if isinstance(first, dict) else None

    return FieldStrategy(f"{parent}[0].{name}", getter)


# Priority order is part of the contract; tests pin it.
PASSAGE_ID_STRATEGIES: tuple[FieldStrategy, ...] = (
    first_item_field("data", "passage_id"),
    nested_field("data", "passage_id"),
    root_field("passage_id"),
)

TEXT_STRATEGIES: tuple[FieldStrategy, ...] = (
    root_field("content"),
    root_field("text"),
    root_field("html"),
)

REFERENCE_STRATEGIES: tuple[FieldStrategy, ...] = (
    root_field("reference"),
    root_field("human_reference"),
)


def extract_first(document: Any, strategies: tuple[FieldStrategy, ...]) -> str | None:
    """Return the first present value, trying strategies in order.

    Args:
        document: Decoded JSON (any shape)
        strategies: Strategies in priority order

    Returns:
        The first present value, or None if no strategy matched
    """
    for strategy in strategies:
        value = strategy(document)
        if value is not None:
            return value
    return None


def extract_passage_id(document: Any) -> str | None:
    return extract_first(document, PASSAGE_ID_STRATEGIES)


def extract_text(document: Any) -> str:
    return extract_first(document, TEXT_STRATEGIES) or TEXT_UNAVAILABLE


def extract_reference(document: Any, fallback: str) -> str:
    """Return the readable reference, or ``fallback`` (the passage id) if absent."""
    return extract_first(document, REFERENCE_STRATEGIES) or fallback


def build_share_url(base_url: str, bible_id: str, passage_id: str) -> str:
    """Build the bible.com display link, e.g. https://www.bible.com/bible/111/MAT.15.13."""
    return f"{base_url.rstrip('/')}/{bible_id}/{passage_id}"
