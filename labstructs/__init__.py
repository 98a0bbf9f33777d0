"""Vector, linked list, stack and queue containers, with reaction-chain and practice exercises."""

__version__ = "0.1.0"
__all__ = ["fifo", "linked_list", "practice", "reactions", "stack", "vector"]