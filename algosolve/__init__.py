"""Solutions to classic algorithm exercises on arrays, strings, integers, grids, linked lists, trees and a chained hash map."""

__version__ = "0.1.0"

__all__ = ["arrays", "grid", "hashmap", "integers", "linked_list", "strings", "tree"]