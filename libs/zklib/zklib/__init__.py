"""zklib: lexer, parser and scope checks for the zk language."""

__version__ = "0.1.0"
