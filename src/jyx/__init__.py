"""jyx: lexical analysis for the jyx scripting language."""

__version__ = "0.1.0"
