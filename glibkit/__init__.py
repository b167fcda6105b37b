"""Linked lists, a stopwatch, indexed relations, string buffers and string helpers."""

__version__ = "0.1.0"
__all__ = ["slist", "timer", "relation", "gstring", "strfuncs", "printf_bound"]