"""
heap.py — Heap Sort
====================
Max-heap sort in two phases:

  Build   : sift down every internal node from n//2 - 1 down to 0.
  Extract : for end = n-1 .. 1, swap the root with a[end], record that
            a[end] now belongs to the sorted tail, then sift the new
            root down through a[0..end-1].

Sift-down records the parent/left-child comparison, then the
largest-so-far/right-child comparison (each only when the child is
inside the heap), and a swap step when the parent must move.  The
sift-down is a loop rather than recursion; the recorded steps are the
same either way.
"""

from typing import List, Sequence

from tracers.step import StepBuilder, Trace


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                            # 0
    "    for i in n//2-1 .. 0: heapify(a, n, i)",   # 1
    "    for end in n-1 .. 1:",                     # 2
    "        swap(a[0], a[end])",                   # 3
    "        heapify(a, end, 0)",                   # 4
    "def heapify(a, n, i):",                        # 5
    "    largest ← i; l ← 2i+1; r ← 2i+2",          # 6
    "    if l < n and a[l] > a[largest]: largest ← l", # 7
    "    if r < n and a[r] > a[largest]: largest ← r", # 8
    "    if largest != i:",                         # 9
    "        swap(a[i], a[largest]); heapify(a, n, largest)", # 10
]


def heap_sort(values: Sequence[int]) -> Trace:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    for i in range(n // 2 - 1, -1, -1):
        _heapify(arr, n, i, sb)

    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        sb.swap(0, end)
        sb.point(root=0, end=end)
        sb.emit(f"Moving largest element {arr[end]} from the root to index {end}")

        sb.mark_sorted(end)
        sb.point(end=end)
        sb.emit(f"{arr[end]} is now in its final position {end}; heapifying remaining elements")

        _heapify(arr, end, 0, sb)

    return sb.finish()


def _heapify(arr: List[int], size: int, i: int, sb: StepBuilder) -> None:
    while True:
        largest = i
        left    = 2 * i + 1
        right   = 2 * i + 2

        if left < size:
            sb.compare(largest, left)
            sb.point(parent=i, largest=largest, child=left)
            sb.emit(f"Comparing {arr[largest]} with left child {arr[left]}")
            if arr[left] > arr[largest]:
                largest = left

        if right < size:
            sb.compare(largest, right)
            sb.point(parent=i, largest=largest, child=right)
            sb.emit(f"Comparing {arr[largest]} with right child {arr[right]}")
            if arr[right] > arr[largest]:
                largest = right

        if largest == i:
            return

        arr[i], arr[largest] = arr[largest], arr[i]
        sb.swap(i, largest)
        sb.point(parent=i, largest=largest)
        sb.emit(f"Swapping {arr[largest]} with {arr[i]}")
        i = largest
