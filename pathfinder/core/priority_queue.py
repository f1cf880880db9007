"""
MinPriorityQueue — indexed min-priority container with tie buckets.

Elements are keyed by identity (hash + equality) and ordered by priority.
Three structures are kept in lock-step:

    element  → priority          (membership and O(1) priority lookup)
    priority → set of elements   (the "tie bucket" for that priority)
    SortedSet of priorities      (only priorities whose bucket is non-empty)

This layout gives decrease-key, removal of arbitrary elements, and the
``extract_all_min`` primitive that hands back every element tied for the
lowest priority in one call.

Also contains UniqueQueue, a FIFO queue that refuses duplicates.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from sortedcontainers import SortedSet

T = TypeVar("T", bound=Hashable)
P = TypeVar("P")


class MinPriorityQueue(Generic[T, P]):
    """
    Min-priority queue supporting insert-or-update, decrease-key,
    remove-by-element, extract-min and extract-all-min.

    Iteration yields elements in ascending priority; the order inside a
    tie bucket is unspecified.
    """

    def __init__(
        self,
        element_to_priority: dict[T, P] | None = None,
        priority_to_elements: dict[P, set[T]] | None = None,
        priorities: SortedSet | None = None,
    ) -> None:
        self._element_to_priority: dict[T, P] = element_to_priority or {}
        self._priority_to_elements: dict[P, set[T]] = priority_to_elements or {}
        self._priorities: SortedSet = (
            priorities if priorities is not None else SortedSet()
        )

    # ── Inspection ─────────────────────────────────────────────────

    @property
    def min_priority(self) -> P | None:
        """Lowest priority present, or ``None`` if the queue is empty."""
        return self._priorities[0] if self._priorities else None

    @property
    def max_priority(self) -> P | None:
        """Highest priority present, or ``None`` if the queue is empty."""
        return self._priorities[-1] if self._priorities else None

    def get_priority_of(self, element: T) -> P:
        """Return the priority of *element*. Raises KeyError if absent."""
        try:
            return self._element_to_priority[element]
        except KeyError:
            raise KeyError(f"Element {element!r} is not in the queue.") from None

    def peek(self) -> T:
        """Return (without removing) an element of the lowest bucket."""
        if not self._priorities:
            raise IndexError("peek from an empty priority queue")
        return next(iter(self._priority_to_elements[self._priorities[0]]))

    def peek_or_none(self) -> T | None:
        return self.peek() if self else None

    # ── Mutation ───────────────────────────────────────────────────

    def insert_or_update(self, element: T, priority: P) -> None:
        """
        Insert *element* with *priority*, or move it to *priority* if it
        is already queued. Does nothing when the priority is unchanged.
        """
        if element in self._element_to_priority:
            current = self._element_to_priority[element]
            if current == priority:
                return
            self._discard(element, current)

        self._element_to_priority[element] = priority
        bucket = self._priority_to_elements.get(priority)
        if bucket is None:
            bucket = set()
            self._priority_to_elements[priority] = bucket
            self._priorities.add(priority)
        bucket.add(element)

    def decrease_priority(self, element: T, priority: P) -> bool:
        """
        Lower the priority of a queued *element*.

        Returns False, leaving the queue untouched, unless *priority* is
        strictly below the current one. Raises KeyError if *element* is
        not queued.
        """
        if self.get_priority_of(element) > priority:
            self.insert_or_update(element, priority)
            return True
        return False

    def remove(self, element: T) -> bool:
        """Remove *element* if present. Returns whether anything was removed."""
        if element not in self._element_to_priority:
            return False
        self._discard(element, self._element_to_priority[element])
        return True

    def extract_min(self) -> T:
        return self.extract_min_with_priority()[0]

    def extract_min_with_priority(self) -> tuple[T, P]:
        """
        Remove and return ``(element, priority)`` for an arbitrary element
        of the lowest bucket. Raises IndexError if the queue is empty.
        """
        if not self._priorities:
            raise IndexError("extract from an empty priority queue")
        lowest = self._priorities[0]
        element = next(iter(self._priority_to_elements[lowest]))
        self._discard(element, lowest)
        return element, lowest

    def extract_min_or_none(self) -> T | None:
        return self.extract_min() if self else None

    def extract_min_with_priority_or_none(self) -> tuple[T, P] | None:
        return self.extract_min_with_priority() if self else None

    def extract_all_min(self) -> set[T]:
        """
        Remove and return every element sharing the lowest priority.

        Afterwards the queue is empty or its minimum is strictly greater.
        Returns an empty set on an empty queue.
        """
        if not self._priorities:
            return set()
        lowest = self._priorities.pop(0)
        bucket = self._priority_to_elements.pop(lowest)
        for element in bucket:
            del self._element_to_priority[element]
        return bucket

    def copy(self) -> MinPriorityQueue[T, P]:
        """Return an independent copy of this queue."""
        return MinPriorityQueue(
            dict(self._element_to_priority),
            {p: set(bucket) for p, bucket in self._priority_to_elements.items()},
            SortedSet(self._priorities),
        )

    # ── Internals ──────────────────────────────────────────────────

    def _discard(self, element: T, priority: P) -> None:
        del self._element_to_priority[element]
        bucket = self._priority_to_elements[priority]
        bucket.remove(element)
        # last element for this priority level
        if not bucket:
            del self._priority_to_elements[priority]
            self._priorities.remove(priority)

    # ── Dunder helpers ─────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._element_to_priority)

    def __bool__(self) -> bool:
        return bool(self._element_to_priority)

    def __contains__(self, element: object) -> bool:
        return element in self._element_to_priority

    def __iter__(self) -> Iterator[T]:
        for priority in self._priorities:
            yield from self._priority_to_elements[priority]

    def __iadd__(self, element_with_priority: tuple[T, P]) -> MinPriorityQueue[T, P]:
        element, priority = element_with_priority
        self.insert_or_update(element, priority)
        return self

    def __isub__(self, element: T) -> MinPriorityQueue[T, P]:
        self.remove(element)
        return self

    def __add__(self, other: MinPriorityQueue[T, P]) -> MinPriorityQueue[T, P]:
        merged = self.copy()
        for element in other:
            merged.insert_or_update(element, other.get_priority_of(element))
        return merged

    def __repr__(self) -> str:
        buckets = ", ".join(
            f"{p!r}: {self._priority_to_elements[p]!r}" for p in self._priorities
        )
        return f"MinPriorityQueue([{buckets}])"


def min_priority_queue_of(
    elements: Iterable[tuple[T, P]] = (),
) -> MinPriorityQueue[T, P]:
    """Factory: a MinPriorityQueue holding all ``(element, priority)`` pairs."""
    queue: MinPriorityQueue[T, P] = MinPriorityQueue()
    for element, priority in elements:
        queue.insert_or_update(element, priority)
    return queue


# ── Unique FIFO queue ──────────────────────────────────────────────

class UniqueQueue(Generic[T]):
    """
    FIFO queue with set semantics: an element already queued is not
    added a second time.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._deque: deque[T] = deque()
        self._members: set[T] = set()
        for element in elements:
            self.add(element)

    def add(self, element: T) -> bool:
        return self.add_last(element)

    def add_first(self, element: T) -> bool:
        if element in self._members:
            return False
        self._members.add(element)
        self._deque.appendleft(element)
        return True

    def add_last(self, element: T) -> bool:
        if element in self._members:
            return False
        self._members.add(element)
        self._deque.append(element)
        return True

    def add_all(self, elements: Iterable[T]) -> bool:
        added_any = False
        for element in elements:
            added_any = self.add(element) or added_any
        return added_any

    def peek(self) -> T:
        if not self._deque:
            raise IndexError("peek from an empty queue")
        return self._deque[0]

    def remove_first(self) -> T:
        element = self._deque.popleft()
        self._members.discard(element)
        return element

    def remove_first_or_none(self) -> T | None:
        return self.remove_first() if self._deque else None

    def remove_last(self) -> T:
        element = self._deque.pop()
        self._members.discard(element)
        return element

    def remove_last_or_none(self) -> T | None:
        return self.remove_last() if self._deque else None

    def __len__(self) -> int:
        return len(self._deque)

    def __bool__(self) -> bool:
        return bool(self._deque)

    def __contains__(self, element: Any) -> bool:
        return element in self._members

    def __iter__(self) -> Iterator[T]:
        return iter(self._deque)

    def __repr__(self) -> str:
        return f"UniqueQueue({list(self._deque)!r})"
