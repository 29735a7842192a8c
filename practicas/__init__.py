"""Linked lists, a stack, console input helpers and small console programs built on them."""

__version__ = "1.0.0"