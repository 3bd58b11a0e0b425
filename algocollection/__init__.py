"""Classic algorithms: graphs, sorting, arrays, dynamic programming, numbers, a linked list and text helpers."""

__version__ = "0.1.0"