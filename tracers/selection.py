"""
selection.py — Selection Sort
==============================
Each outer pass scans the unsorted suffix for its minimum:
  1. Compare running minimum with a candidate  →  compared = {min, j}
  2. Swap the minimum into position i           →  swapped  = {i, min}
  3. Index i joins the sorted prefix

Strict `<` keeps the first of equal minima, as in the classic algorithm.
"""

from typing import List, Sequence

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-2:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",        # 4
    "        if min != i: swap(a[i], a[min])",      # 5
    "        mark a[i] sorted",                     # 6
]


def selection_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    for i in range(n - 1):
        min_idx = i

        for j in range(i + 1, n):
            sb.compare(min_idx, j)
            sb.point(i=i, min=min_idx, j=j)
            sb.emit(
                f"Finding minimum element: comparing {arr[j]} "
                f"with current minimum {arr[min_idx]}"
            )
            if arr[j] < arr[min_idx]:
                min_idx = j

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            sb.swap(i, min_idx)
            sb.point(i=i, min=min_idx)
            sb.emit(f"Swapping {arr[i]} with {arr[min_idx]}")

        sb.mark_sorted(i)

    return sb.finish()
