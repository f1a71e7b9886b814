"""ASCII character, byte-buffer, string, linked-list and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "linkedlist", "printf"]