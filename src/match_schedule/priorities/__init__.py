from match_schedule.priorities.store import (
    PriorityReader,
    PrioritySnapshot,
    PriorityStore,
    PriorityStoreError,
)

__all__ = [
    "PriorityReader",
    "PrioritySnapshot",
    "PriorityStore",
    "PriorityStoreError",
]
