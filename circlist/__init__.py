"""A circular doubly linked list, with a small demonstration command."""

__version__ = "1.0.0"
__all__ = ["linkedlist", "demo"]