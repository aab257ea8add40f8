"""Classic data structures and algorithms, a ride-booking simulation and a one-shot TCP exchange."""

__version__ = "0.1.0"

__all__ = [
    "dynamic_array",
    "graph",
    "hashmap",
    "heap_problems",
    "linked_list",
    "orderbook",
    "pascal",
    "rides",
    "stack_problems",
    "tcp",
    "trees",
]