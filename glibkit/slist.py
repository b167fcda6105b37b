"""A singly linked list with ordered insertion and merge sort."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

CompareFunc = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: Optional["_Node"] = None) -> None:
        self.data = data
        self.next = next_node


def _merge(left: Optional[_Node], right: Optional[_Node], func: CompareFunc) -> Optional[_Node]:
    head = _Node(None)
    tail = head
    while left is not None and right is not None:
        if func(left.data, right.data) < 0:
            tail.next = left
            tail = left
            left = left.next
        else:
            tail.next = right
            tail = right
            right = right.next
    tail.next = left if left is not None else right
    return head.next


def _merge_sort(head: Optional[_Node], func: CompareFunc) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    middle = head
    probe = head.next
    while True:
        probe = probe.next
        if probe is None:
            break
        probe = probe.next
        if probe is None:
            break
        middle = middle.next
    second = middle.next
    middle.next = None
    return _merge(_merge_sort(head, func), _merge_sort(second, func), func)


class SList:
    """A singly linked list of arbitrary items."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        tail: Optional[_Node] = None
        for item in iterable:
            node = _Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Optional[_Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def append(self, data: Any) -> None:
        """Add an item at the end."""
        node = _Node(data)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node

    def prepend(self, data: Any) -> None:
        """Add an item at the front."""
        self._head = _Node(data, self._head)

    def insert(self, data: Any, position: int) -> None:
        """Insert before ``position``; negative or past-the-end positions append."""
        if position < 0:
            self.append(data)
            return
        if position == 0:
            self.prepend(data)
            return
        node = _Node(data)
        prev: Optional[_Node] = None
        current = self._head
        while position > 0 and current is not None:
            prev = current
            current = current.next
            position -= 1
        if prev is None:
            node.next = self._head
            self._head = node
        else:
            node.next = prev.next
            prev.next = node

    def concat(self, other: "SList") -> None:
        """Move every item of ``other`` onto the end of this list, emptying ``other``."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._head is None:
            return
        last = self._last_node()
        if last is None:
            self._head = other._head
        else:
            last.next = other._head
        other._head = None

    def remove(self, data: Any) -> bool:
        """Remove the first item equal to ``data``; return whether one was found."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == data:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                node.next = None
                return True
            prev = node
        return False

    def copy(self) -> "SList":
        """Return a shallow copy."""
        return SList(self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def nth(self, n: int) -> Any:
        """Return the item at position ``n``."""
        if n < 0:
            raise IndexError("list index out of range")
        for position, item in enumerate(self):
            if position == n:
                return item
        raise IndexError("list index out of range")

    def index(self, data: Any) -> int:
        """Return the position of the first item equal to ``data``."""
        for position, item in enumerate(self):
            if item == data:
                return position
        raise ValueError(f"{data!r} is not in list")

    def find_custom(self, data: Any, func: CompareFunc) -> Any:
        """Return the first item for which ``func(item, data)`` is zero, else None."""
        if func is None:
            raise TypeError("a compare function is required")
        for item in self:
            if not func(item, data):
                return item
        return None

    def last(self) -> Any:
        """Return the last item."""
        node = self._last_node()
        if node is None:
            raise IndexError("last item of an empty list")
        return node.data

    def insert_sorted(self, data: Any, func: CompareFunc) -> None:
        """Insert before the first item that ``data`` does not compare greater than."""
        if func is None:
            raise TypeError("a compare function is required")
        node = _Node(data)
        current = self._head
        if current is None:
            self._head = node
            return
        prev: Optional[_Node] = None
        cmp = func(data, current.data)
        while current.next is not None and cmp > 0:
            prev = current
            current = current.next
            cmp = func(data, current.data)
        if current.next is None and cmp > 0:
            current.next = node
        elif prev is not None:
            prev.next = node
            node.next = current
        else:
            node.next = self._head
            self._head = node

    def sort(self, func: CompareFunc) -> None:
        """Merge-sort the list in place using a three-way compare function."""
        if func is None:
            raise TypeError("a compare function is required")
        self._head = _merge_sort(self._head, func)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __contains__(self, data: Any) -> bool:
        return any(item == data for item in self)

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"