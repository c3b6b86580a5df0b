"""
Ledger Error Types

Closed set of failures a ledger operation can report. Each variant carries a
fixed display string so the command loop can print it without inspecting
the exception further.
"""


class TransactionError(Exception):
    """Base class for failed ledger operations"""

    kind = "transaction_error"
    display = "Transaction failed"

    def __str__(self) -> str:
        return self.display


class InsufficientFunds(TransactionError):
    """Source account balance is lower than the requested amount"""

    kind = "insufficient_funds"
    display = "Insufficient funds"


class AccountNotFound(TransactionError):
    """Source or destination account is not in the ledger"""

    kind = "account_not_found"
    display = "Account not found"
