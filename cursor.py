from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

class Cursor(Generic[T]):
    """Single-pass reader with one element of lookahead.

    Reading past the end yields ``sentinel`` instead of raising; ``consume()``
    at the end returns the sentinel and leaves the position where it is.
    """

    def __init__(self, items: Sequence[T], sentinel: T = ""):
        self.items = items
        self.i = 0
        self.sentinel = sentinel

    @property
    def current(self) -> T:
        return self.items[self.i] if self.i < len(self.items) else self.sentinel

    def consume(self) -> T:
        x = self.current
        self.i += self.i < len(self.items)
        return x

    def is_open(self) -> bool:
        return self.i < len(self.items)
