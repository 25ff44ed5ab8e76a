"""Classic data structures and algorithms: sorting, searching, trees, dynamic
programming, expressions, matrices, containers and linked lists."""

__version__ = "0.1.0"