"""Classic sorting, searching, sequence and linked-list algorithms, with two small command-line tools."""

__version__ = "0.1.0"
__all__ = ["sorting", "searching", "sequences", "linked_list", "singly_list", "cli"]