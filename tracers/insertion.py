"""
insertion.py — Insertion Sort
==============================
Grows a sorted prefix one element at a time:
  1. Pick the key a[i]                        →  compared = {i}
  2. Compare a[j] with the key                →  compared = {j, j+1}
  3. Shift a[j] one slot right if larger      →  swapped  = {j, j+1}
  4. Drop the key into the hole               →  i joins the sorted set

Every comparison is recorded, including the one that stops the scan.
"""

from typing import List, Sequence

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 .. n-1:",                       # 1
    "        key ← a[i]; j ← i - 1",                # 2
    "        while j >= 0 and a[j] > key:",         # 3
    "            a[j+1] ← a[j]",                    # 4
    "            j ← j - 1",                        # 5
    "        a[j+1] ← key",                         # 6
]


def insertion_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    if n:
        sb.mark_sorted(0)

    for i in range(1, n):
        key = arr[i]
        j   = i - 1

        sb.compare(i)
        sb.point(key=i)
        sb.emit(f"Current element to insert: {key}")

        while j >= 0:
            sb.compare(j, j + 1)
            sb.point(key=j + 1, j=j)
            sb.emit(f"Comparing {arr[j]} with {key}")
            if arr[j] <= key:
                break

            arr[j + 1] = arr[j]
            sb.swap(j, j + 1)
            sb.point(key=j, j=j)
            sb.emit(f"Moving {arr[j]} to the right")
            j -= 1

        arr[j + 1] = key
        sb.mark_sorted(i)
        sb.point(key=j + 1)
        sb.emit(f"Inserted {key} into position {j + 1}")

    return sb.finish()
