"""File system tree representation with configurable exclusion rules.

This package provides the node type, the builder that walks a directory into a
tree of nodes, and the renderer and statistics helpers that consume a built tree.
"""
