"""Singly-linked node chain with head and tail pointers.

The chain supports O(1) insertion at either end and O(1) removal from the
front. It is the storage layer for ``stack.Stack``.
"""

import copy
from typing import Any, Dict, TypeVar, Generic, Iterator, List, Optional

T = TypeVar('T')


class LinkedList(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.next: Optional['LinkedList.Node'] = None

    def __init__(self) -> None:
        self._head: Optional[LinkedList.Node] = None
        self._tail: Optional[LinkedList.Node] = None
        self._size: int = 0

    def push_front(self, value: T) -> None:
        node = LinkedList.Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = LinkedList.Node(value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        if self._head is None:
            raise IndexError("pop_front from empty list")
        node = self._head
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front from empty list")
        return self._head.value

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back from empty list")
        return self._tail.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def copy(self) -> 'LinkedList[T]':
        clone: LinkedList[T] = LinkedList()
        for value in self:
            clone.push_back(value)
        return clone

    def to_list(self) -> List[T]:
        """Values in head-to-tail order, as a new list."""
        return [value for value in self]

    def __copy__(self) -> 'LinkedList[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'LinkedList[T]':
        clone: LinkedList[T] = LinkedList()
        memo[id(self)] = clone
        for value in self:
            clone.push_back(copy.deepcopy(value, memo))
        return clone

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size
