"""Wallet ledger: sent/received crypto transactions against user balances."""

__version__ = "0.1.0"
