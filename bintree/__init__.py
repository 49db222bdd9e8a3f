"""Linked binary trees: building, traversal, structural queries, ASCII rendering and demos."""

__version__ = "0.1.0"