import time
from typing import Iterable


def timestamp_id(existing: Iterable[int]) -> int:
    # millisecond timestamp, bumped past the current max on collision
    stamp = int(time.time() * 1000)
    taken = set(existing)
    if stamp in taken:
        stamp = max(taken) + 1
    return stamp


def next_sequential_id(existing: Iterable[int]) -> int:
    return max(existing, default=0) + 1


def enquiry_code(record_id: int) -> str:
    return f"ENQ-{record_id:04d}"
