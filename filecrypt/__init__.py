"""Toy Caesar, RSA and XOR ciphers, task strings, and in-place file rewriting."""

__version__ = "0.1.0"
__all__ = ["ciphers", "fileio", "task"]