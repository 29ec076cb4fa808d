from typing import Any


class ElementRegistry:
    """Explicit tag -> element class table, populated by the host at startup."""

    def __init__(self) -> None:
        self._elements: dict[str, type] = {}

    def define(self, tag: str, cls: type) -> None:
        if tag in self._elements:
            raise ValueError(f"Element {tag!r} is already defined")
        self._elements[tag] = cls

    def get(self, tag: str) -> type:
        try:
            return self._elements[tag]
        except KeyError:
            raise LookupError(f"Element {tag!r} is not defined") from None

    def create(self, tag: str, **kwargs: Any) -> Any:
        return self.get(tag)(**kwargs)

    def __contains__(self, tag: object) -> bool:
        return tag in self._elements

    @property
    def tags(self) -> list[str]:
        return sorted(self._elements)
