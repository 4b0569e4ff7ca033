"""
merge.py — Merge Sort
======================
Top-down merge sort, left half first, `mid = (low + high) // 2`.

During a merge the two halves are copied aside and written back into
a[low..high].  A step is recorded for every element-wise comparison;
`compared` holds the two candidates' positions in the original halves
(left + i, mid + 1 + j).  Once a merge completes, one more step adds the
whole merged range to the sorted set.

Ties take the left element (`<=`), which keeps the sort stable.  Merge
sort never swaps, so no step carries swapped indices.
"""

from typing import List, Sequence

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def merge_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        mid ← (low + high) // 2",              # 2
    "        merge_sort(a, low, mid)",              # 3
    "        merge_sort(a, mid + 1, high)",         # 4
    "        merge(a, low, mid, high)",             # 5
    "def merge(a, low, mid, high):",                # 6
    "    while both halves non-empty:",             # 7
    "        take the smaller head (left on ties)", # 8
    "    copy whatever remains",                    # 9
]


def merge_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    sb  = StepBuilder(arr)

    _sort(arr, 0, len(arr) - 1, sb)
    return sb.finish()


def _sort(arr: List[int], low: int, high: int, sb: StepBuilder) -> None:
    if low >= high:
        return
    mid = (low + high) // 2
    _sort(arr, low, mid, sb)
    _sort(arr, mid + 1, high, sb)
    _merge(arr, low, mid, high, sb)


def _merge(arr: List[int], low: int, mid: int, high: int, sb: StepBuilder) -> None:
    left  = arr[low:mid + 1]
    right = arr[mid + 1:high + 1]
    i = j = 0
    k = low

    while i < len(left) and j < len(right):
        sb.compare(low + i, mid + 1 + j)
        sb.point(low=low, mid=mid, high=high, k=k)
        sb.emit(f"Comparing {left[i]} with {right[j]}")

        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        k += 1

    while i < len(left):
        arr[k] = left[i]
        i += 1
        k += 1

    while j < len(right):
        arr[k] = right[j]
        j += 1
        k += 1

    sb.mark_sorted_range(range(low, high + 1))
    sb.point(low=low, high=high)
    sb.emit(f"Merged subarray from index {low} to {high}")
