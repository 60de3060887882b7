"""Parsing and printing of Go source files.

- :mod:`gig.syntax.tree` - immutable top-level view of a file
- :mod:`gig.syntax.parser` - tree-sitter based parser
- :mod:`gig.syntax.printer` - printing of rebuilt trees
"""
