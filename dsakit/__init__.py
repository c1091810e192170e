"""Sorting, searching, array edits, sparse matrices, linked lists, binary trees and stacks."""

__version__ = "0.1.0"