"""
Banking Ledger

An interactive command-line ledger of named accounts with floating-point
balances. Supports creating accounts, transferring funds and checking
balances; all state is kept in memory for the lifetime of the session.
"""

__version__ = "1.0.0"
