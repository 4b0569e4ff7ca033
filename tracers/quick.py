"""
quick.py — Quick Sort (Lomuto partition, last-element pivot)
=============================================================
The partition scheme is fixed so traces are reproducible:

  • pivot    = a[high]  (always the last element of the range)
  • scheme   = Lomuto; `i` marks the end of the "≤ pivot" region
  • ties     = `a[j] <= pivot` moves equal elements to the left side
  • order    = left partition fully before the right partition

Steps recorded per partition:
  1. Pivot chosen                              →  pointers["pivot"]
  2. Each a[j] compared against the pivot      →  compared = {j, high}
  3. Each swap that actually moves data        →  swapped  = {i, j}
  4. Pivot swapped into slot i+1 (if it moves) →  swapped  = {i+1, high}
  5. Pivot placed                              →  its index joins sorted

A range holding one element is recorded as sorted in a single step.

Recursion is replaced by an explicit stack so that degenerate inputs
(sorted, reverse-sorted, all-equal) cannot hit the interpreter's
recursion limit.  The right range is pushed before the left one, which
reproduces exactly the order the recursive version would visit them.
"""

from typing import List, Sequence, Tuple

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        p ← partition(a, low, high)",          # 2
    "        quick_sort(a, low, p - 1)",            # 3
    "        quick_sort(a, p + 1, high)",           # 4
    "def partition(a, low, high):",                 # 5
    "    pivot ← a[high]; i ← low - 1",             # 6
    "    for j in low .. high-1:",                  # 7
    "        if a[j] <= pivot:",                    # 8
    "            i ← i + 1; swap(a[i], a[j])",      # 9
    "    swap(a[i+1], a[high])",                    # 10
    "    return i + 1",                             # 11
]


def quick_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    sb  = StepBuilder(arr)

    stack: List[Tuple[int, int]] = [(0, len(arr) - 1)]
    while stack:
        low, high = stack.pop()
        if low > high:
            continue
        if low == high:
            sb.mark_sorted(low)
            sb.point(low=low, high=high)
            sb.emit(f"Single element {arr[low]} at index {low} is already in place")
            continue

        p = _partition(arr, low, high, sb)
        stack.append((p + 1, high))
        stack.append((low, p - 1))

    return sb.finish()


def _partition(arr: List[int], low: int, high: int, sb: StepBuilder) -> int:
    pivot = arr[high]
    i = low - 1

    sb.point(pivot=high, low=low, high=high)
    sb.emit(f"Choosing pivot {pivot} at index {high} (last element of {low}..{high})")

    for j in range(low, high):
        sb.compare(j, high)
        sb.point(pivot=high, low=low, high=high, j=j, i=i if i >= low else None)
        sb.emit(f"Comparing {arr[j]} with pivot {pivot}")

        if arr[j] <= pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                sb.swap(i, j)
                sb.point(pivot=high, low=low, high=high, i=i, j=j)
                sb.emit(f"Swapping {arr[i]} (index {j}) with {arr[j]} (index {i})")

    p = i + 1
    if p != high:
        arr[p], arr[high] = arr[high], arr[p]
        sb.swap(p, high)
        sb.point(pivot=p, low=low, high=high)
        sb.emit(f"Swapping pivot {pivot} into index {p}")

    sb.mark_sorted(p)
    sb.point(pivot=p, low=low, high=high)
    sb.emit(
        f"Pivot {pivot} is in its final position {p}: "
        f"elements to its left are <= {pivot}, elements to its right are greater"
    )
    return p
