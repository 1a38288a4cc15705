"""Practice exercises and classic data structures.

Modules: basics (number and character checks), binary_tree, linked_list, graph.
"""

__version__ = "0.1.0"