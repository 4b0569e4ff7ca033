"""
bubble.py — Bubble Sort
========================
Records a TraceStep at every meaningful event:
  1. Compare an adjacent pair        →  compared = {j, j+1}
  2. Swap them if out of order       →  swapped  = {j, j+1}
  3. End of a pass                   →  index n-i-1 joins the sorted tail

No early exit: an already-sorted input still walks every pass so the
trace shows every comparison the textbook algorithm makes.
"""

from typing import List, Sequence

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-i-2:",                 # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
    "        mark a[n-i-1] sorted",                 # 5
]


def bubble_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    for i in range(n - 1):
        for j in range(n - i - 1):
            sb.compare(j, j + 1)
            sb.point(i=j, j=j + 1)
            sb.emit(f"Comparing {arr[j]} with {arr[j + 1]}")

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                sb.swap(j, j + 1)
                sb.point(i=j, j=j + 1)
                sb.emit(f"Swapping {arr[j + 1]} and {arr[j]}")

        sb.mark_sorted(n - i - 1)

    return sb.finish()
