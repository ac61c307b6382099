"""An ordered collection of text stacks."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from .stack import TextStack

__all__ = ["TextArray"]


class TextArray:
    """A list of :class:`TextStack` objects with joining and splitting helpers."""

    def __init__(self, stacks: Iterable[TextStack] | None = None) -> None:
        self.stacks: list[TextStack] = list(stacks) if stacks is not None else []

    def __len__(self) -> int:
        return len(self.stacks)

    def __iter__(self) -> Iterator[TextStack]:
        return iter(self.stacks)

    def __getitem__(self, index: int) -> TextStack:
        return self.stacks[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(s) for s in self.stacks]!r})"

    def append(self, stack: TextStack) -> None:
        self.stacks.append(stack)

    def append_string(self, element: str | None) -> None:
        self.append(TextStack.from_string(element))

    def join(self, separator: str | None) -> TextStack:
        """Return a new stack with every element's text joined by ``separator``."""
        return TextStack.from_string((separator or "").join(str(s) for s in self.stacks))

    @classmethod
    def split(cls, element: str, target: str) -> TextArray:
        """Split ``element`` at each position where ``target`` starts.

        Only the first character of a matched ``target`` is dropped; the rest
        of it begins the next piece. An empty ``target`` never matches.
        """
        pieces: list[str] = []
        current: list[str] = []
        for position, char in enumerate(element):
            if target and element.startswith(target, position):
                pieces.append("".join(current))
                current = []
                continue
            current.append(char)
        pieces.append("".join(current))
        return cls(TextStack.from_string(piece) for piece in pieces)

    def map(self, func: Callable[[TextStack], TextStack]) -> TextArray:
        """Return a new array of ``func`` applied to every element."""
        return TextArray(func(stack) for stack in self.stacks)

    def filter(self, predicate: Callable[[TextStack], bool]) -> TextArray:
        """Return a new array of copies of the elements ``predicate`` accepts."""
        return TextArray(stack.clone() for stack in self.stacks if predicate(stack))

    def foreach(self, func: Callable[[TextStack], Any]) -> None:
        """Call ``func`` on every element."""
        for stack in self.stacks:
            func(stack)

    def includes(self, element: str) -> bool:
        """Tell whether any element's text is exactly ``element``."""
        return any(stack.equal(element) for stack in self.stacks)

    def represent(self) -> None:
        """Print every element on its own line."""
        for stack in self.stacks:
            stack.represent()