"""The display file: the ordered list of objects on screen."""

from __future__ import annotations

from typing import Iterator

from cgdisplay.graphic import GraphicObject


class DisplayFile:
    """Ordered collection of graphic objects; out-of-range edits are ignored."""

    def __init__(self) -> None:
        self._objects: list[GraphicObject] = []

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._objects)

    def add(self, obj: GraphicObject) -> None:
        self._objects.append(obj)

    def update(self, index: int, obj: GraphicObject) -> None:
        """Replace the object at ``index`` if it exists."""
        if self._in_range(index):
            self._objects[index] = obj

    def remove(self, index: int) -> None:
        """Remove the object at ``index`` if it exists."""
        if self._in_range(index):
            del self._objects[index]

    def clear(self) -> None:
        self._objects.clear()

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GraphicObject]:
        return iter(self._objects)

    def __getitem__(self, index: int) -> GraphicObject:
        if not self._in_range(index):
            raise IndexError(f"display file index out of range: {index}")
        return self._objects[index]