"""Classic data structures and algorithms: sorting, number theory, graphs,
hashing problems, linked lists, heaps, binary trees, KMP, tries, tree
ancestor queries, segment trees and a top-k multiset."""

__version__ = "0.1.0"