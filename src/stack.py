"""LIFO stack on top of a singly-linked node chain.

Elements are pushed at the head of the chain, so push, pop and top are all
O(1). Iteration, ``to_list`` and ``str`` report elements in insertion order
(oldest first), which is the reverse of the order ``pop`` returns them.
"""

import copy
from typing import Any, Dict, TypeVar, Generic, Iterable, Iterator, List

from linked_list import LinkedList

T = TypeVar('T')


class EmptyStackError(IndexError):
    """Raised by ``top`` and ``pop`` when the stack holds no elements."""


class UnsupportedOperationError(TypeError):
    """Raised when a stack is used where a hashable value is required."""


class Stack(Generic[T]):
    def __init__(self) -> None:
        self._chain: LinkedList = LinkedList()

    def is_empty(self) -> bool:
        return self._chain.is_empty()

    def push(self, *elems: T) -> None:
        """Push each argument in order; the last one ends up on top."""
        self.push_all(elems)

    def push_all(self, elems: Iterable[T]) -> None:
        """Push elements in the order ``elems`` yields them.

        Works with one-shot iterators. The first element yielded is covered
        by every later one.
        """
        for elem in elems:
            self._chain.push_front(elem)

    def top(self) -> T:
        if self._chain.is_empty():
            raise EmptyStackError("stack empty")
        return self._chain.front()

    def pop(self) -> T:
        if self._chain.is_empty():
            raise EmptyStackError("stack empty")
        return self._chain.pop_front()

    def clear(self) -> None:
        self._chain.clear()

    def size(self) -> int:
        return len(self._chain)

    def to_list(self) -> List[T]:
        """Create a list of all elements in insertion (FIFO) order."""
        elems = self._chain.to_list()
        elems.reverse()
        return elems

    def iterate(self) -> Iterator[T]:
        """Iterate over a snapshot of the stack, oldest element first.

        The snapshot is taken when this is called, so later pushes and pops
        are not reflected in the returned iterator.
        """
        return iter(self.to_list())

    def clone(self) -> 'Stack[T]':
        res: Stack[T] = Stack()
        res.push_all(self.iterate())
        return res

    def copy(self) -> 'Stack[T]':
        return self.clone()

    def __copy__(self) -> 'Stack[T]':
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Stack[T]':
        res: Stack[T] = Stack()
        memo[id(self)] = res
        res.push_all(copy.deepcopy(elem, memo) for elem in self.iterate())
        return res

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._chain)

    def __bool__(self) -> bool:
        return not self._chain.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return False
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self.iterate(), other.iterate()))

    def __hash__(self) -> int:
        raise UnsupportedOperationError("unsuitable as hash key")

    def __str__(self) -> str:
        return "Stack(" + ", ".join(str(elem) for elem in self.to_list()) + ")"

    def __repr__(self) -> str:
        return str(self)
