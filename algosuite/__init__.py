"""Algorithm routines for linked lists, binary trees, arrays, strings, graphs and counting."""

__version__ = "0.1.0"
__all__ = ["arrays", "binary_tree", "counting", "design", "graphs", "linked_list", "strings"]