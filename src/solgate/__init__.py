"""Solgate: stateless Solana key, signature and instruction gateway."""

__version__ = "0.1.0"
