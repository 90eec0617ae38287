from __future__ import annotations

import logging
from typing import Callable, TypeVar

from osuPP.beatmap import GameMode, HitObject

T = TypeVar("T")

INTRO_SORT_SIZE_THRESHOLD = 16


def sort_by_time(items: list, key: Callable = lambda item: item.time) -> None:
    """Stable in-place sort by time."""
    items.sort(key=key)


def sort_hit_objects(hit_objects: list[HitObject], mode: GameMode, unsorted: bool) -> None:
    """Order hit objects the way the mode expects them.

    osu!mania needs a stable sort followed by the legacy sort of osu!stable
    to place notes of the same time in the same order as the game does.
    Other modes only sort if an object arrived out of order.

    Args:
        hit_objects: Hit objects in file order, sorted in place.
        mode: Game mode in effect when the [HitObjects] section ended.
        unsorted: Whether an object had an earlier time than its predecessor.
    """
    if mode is GameMode.MANIA:
        sort_by_time(hit_objects, key=_start_time)
        legacy_sort(hit_objects, key=_start_time)
        logging.debug(f"legacy sorted {len(hit_objects)} hit objects")
    elif unsorted:
        sort_by_time(hit_objects, key=_start_time)
        logging.debug(f"sorted {len(hit_objects)} out of order hit objects")


def _start_time(hit_object: HitObject) -> float:
    return hit_object.start_time


def legacy_sort(items: list[T], key: Callable[[T], float]) -> None:
    """In-place introspective sort as performed by osu!stable's runtime.

    The sort is unstable, so equal keys end up in the same order osu!stable
    produces, which decides column order of simultaneous osu!mania notes.
    """
    if len(items) < 2:
        return
    _LegacySorter(items, key).intro_sort(0, len(items) - 1, 2 * _floor_log2(len(items)))


def _floor_log2(n: int) -> int:
    result = 0
    while n >= 1:
        result += 1
        n //= 2
    return result


class _LegacySorter(object):
    def __init__(self, items: list, key: Callable):
        self.items = items
        self.key = key

    def compare(self, a, b) -> int:
        a, b = self.key(a), self.key(b)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def swap(self, i: int, j: int) -> None:
        if i != j:
            self.items[i], self.items[j] = self.items[j], self.items[i]

    def swap_if_greater(self, i: int, j: int) -> None:
        if i != j and self.compare(self.items[i], self.items[j]) > 0:
            self.swap(i, j)

    def intro_sort(self, lo: int, hi: int, depth_limit: int) -> None:
        while hi > lo:
            partition_size = hi - lo + 1

            if partition_size <= INTRO_SORT_SIZE_THRESHOLD:
                if partition_size == 2:
                    self.swap_if_greater(lo, hi)
                elif partition_size == 3:
                    self.swap_if_greater(lo, hi - 1)
                    self.swap_if_greater(lo, hi)
                    self.swap_if_greater(hi - 1, hi)
                else:
                    self.insertion_sort(lo, hi)
                return

            if depth_limit == 0:
                self.heap_sort(lo, hi)
                return

            depth_limit -= 1
            pivot = self.pick_pivot_and_partition(lo, hi)
            self.intro_sort(pivot + 1, hi, depth_limit)
            hi = pivot - 1

    def pick_pivot_and_partition(self, lo: int, hi: int) -> int:
        items = self.items
        mid = lo + (hi - lo) // 2

        self.swap_if_greater(lo, mid)
        self.swap_if_greater(lo, hi)
        self.swap_if_greater(mid, hi)

        pivot = items[mid]
        self.swap(mid, hi - 1)
        left, right = lo, hi - 1

        while left < right:
            left += 1
            while self.compare(items[left], pivot) < 0:
                left += 1
            right -= 1
            while self.compare(pivot, items[right]) < 0:
                right -= 1

            if left >= right:
                break

            self.swap(left, right)

        self.swap(left, hi - 1)
        return left

    def heap_sort(self, lo: int, hi: int) -> None:
        n = hi - lo + 1

        for i in range(n // 2, 0, -1):
            self.down_heap(i, n, lo)

        for i in range(n, 1, -1):
            self.swap(lo, lo + i - 1)
            self.down_heap(1, i - 1, lo)

    def down_heap(self, i: int, n: int, lo: int) -> None:
        items = self.items
        d = items[lo + i - 1]

        while i <= n // 2:
            child = 2 * i
            if child < n and self.compare(items[lo + child - 1], items[lo + child]) < 0:
                child += 1

            if not self.compare(d, items[lo + child - 1]) < 0:
                break

            items[lo + i - 1] = items[lo + child - 1]
            i = child

        items[lo + i - 1] = d

    def insertion_sort(self, lo: int, hi: int) -> None:
        items = self.items

        for i in range(lo, hi):
            j = i
            t = items[i + 1]

            while j >= lo and self.compare(t, items[j]) < 0:
                items[j + 1] = items[j]
                j -= 1

            items[j + 1] = t
