"""
In-Memory Ledger

Owns the mapping of account names to balances and implements the three
ledger operations: create an account, transfer between two accounts and
query a balance. Balances are plain floats; no rounding is applied.
"""

from typing import Dict, Optional

from .errors import AccountNotFound, InsufficientFunds
from .logging_config import get_logger, log_action


class Ledger:
    """
    Collection of named accounts and their balances

    Account names are unique keys. The ledger is created empty and lives
    only as long as the process.
    """

    def __init__(self):
        self._accounts: Dict[str, float] = {}
        self.logger = get_logger("banking_ledger.ledger")

    def __contains__(self, name: str) -> bool:
        return name in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def __repr__(self) -> str:
        return f"Ledger(accounts={len(self._accounts)})"

    def create_account(self, name: str, initial_balance: float) -> None:
        """
        Create an account, replacing the balance of any account with the same name

        Args:
            name: Account name, used as the key
            initial_balance: Opening balance; any real number is accepted
        """
        replaced = name in self._accounts
        self._accounts[name] = initial_balance

        log_action(
            self.logger, "info", "Account created",
            action="create_account", resource=f"account:{name}",
            extra={"initial_balance": initial_balance, "replaced": replaced}
        )

    def transfer(self, from_account: str, to_account: str, amount: float) -> None:
        """
        Move funds from one account to another

        Both balances change or neither does. The funds check is the literal
        comparison ``source_balance >= amount``: a zero amount always passes
        and a negative amount moves funds from destination to source.

        Args:
            from_account: Name of the account to debit
            to_account: Name of the account to credit
            amount: Amount to move

        Raises:
            AccountNotFound: If either account does not exist
            InsufficientFunds: If the source balance is lower than amount
        """
        resource = f"account:{from_account}"

        if from_account not in self._accounts or to_account not in self._accounts:
            missing = [n for n in (from_account, to_account) if n not in self._accounts]
            log_action(
                self.logger, "info", "Transfer rejected: account not found",
                action="transfer", resource=resource,
                extra={"to_account": to_account, "amount": amount, "missing": missing}
            )
            raise AccountNotFound(f"Account not found: {', '.join(missing)}")

        source_balance = self._accounts[from_account]
        if not source_balance >= amount:
            log_action(
                self.logger, "info", "Transfer rejected: insufficient funds",
                action="transfer", resource=resource,
                extra={"to_account": to_account, "amount": amount, "available": source_balance}
            )
            raise InsufficientFunds(
                f"Insufficient funds: available {source_balance}, requested {amount}"
            )

        if amount < 0:
            log_action(
                self.logger, "info", "Negative transfer amount reverses direction",
                action="transfer", resource=resource,
                extra={"to_account": to_account, "amount": amount}
            )

        # Self-transfer: net change is zero
        if from_account != to_account:
            self._accounts[from_account] = source_balance - amount
            self._accounts[to_account] = self._accounts[to_account] + amount

        log_action(
            self.logger, "info", "Transfer completed",
            action="transfer", resource=resource,
            extra={"to_account": to_account, "amount": amount}
        )

    def balance(self, name: str) -> Optional[float]:
        """Get the balance of an account, or None if it does not exist"""
        return self._accounts.get(name)

    def accounts(self) -> Dict[str, float]:
        """Get a snapshot of all account balances"""
        return dict(self._accounts)
