"""
Interactive Command Loop

Line-oriented menu over stdin/stdout. Each iteration prints the menu, reads
a choice and dispatches to one of the flows below. The Ledger instance is
owned by the loop and handed to each flow explicitly.

Outputs:
- Confirmations ("Account created successfully!", "Transaction successful!")
- Ledger failures as "Error: <reason>"
- Balance reports as "Balance of <name>: <value>"
"""

import math
import re
import sys
from decimal import Decimal
from typing import Callable, Dict, Optional, TextIO

from .config import get_config
from .errors import TransactionError
from .ledger import Ledger
from .logging_config import setup_logging, get_logger, log_action


MENU_LINES = (
    "Banking System Menu:",
    "1. Create Account",
    "2. Perform Transaction",
    "3. Check Balance",
    "4. Exit",
)
EXIT_CHOICE = 4

_CHOICE_RE = re.compile(r"\+?[0-9]+")
_MAX_CHOICE = 2 ** 32 - 1

logger = get_logger("banking_ledger.cli")


class InputReadError(Exception):
    """Raised when the input stream cannot be read at all"""
    pass


class Console:
    """Reads trimmed lines from an input stream and prints lines to an output stream"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> str:
        """
        Read the next line with surrounding whitespace removed

        Raises:
            InputReadError: On end of stream or an I/O failure
        """
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read input: {e}") from e
        if not line:
            raise InputReadError("Failed to read input: end of input stream")
        return line.strip()

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)


# ---------- Parsing & formatting ----------

def parse_choice(text: str) -> Optional[int]:
    """Parse a menu choice as an unsigned 32-bit integer; None if it is not one"""
    if not _CHOICE_RE.fullmatch(text):
        return None
    value = int(text)
    if value > _MAX_CHOICE:
        return None
    return value


def parse_amount(text: str) -> Optional[float]:
    """
    Parse a real number typed by the user

    Accepts decimal and exponent notation, an optional sign, and the
    inf/infinity/nan spellings. Digit-group underscores and non-ASCII digits
    are rejected.
    """
    if not text.isascii() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def format_balance(value: float) -> str:
    """Format a balance: 100.0 -> "100", 80.5 -> "80.5", 1e-7 -> "0.0000001" """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    digits = Decimal(repr(value))
    if value.is_integer():
        digits = digits.to_integral_value()
    return format(digits, "f")


# ---------- Flows ----------

def create_account(ledger: Ledger, console: Console) -> None:
    console.write("Enter account name:")
    name = console.read_line()

    console.write("Enter initial balance:")
    balance = parse_amount(console.read_line())
    if balance is None:
        console.write("Invalid balance. Please try again.")
        return

    ledger.create_account(name, balance)
    console.write("Account created successfully!")


def perform_transaction(ledger: Ledger, console: Console) -> None:
    console.write("Enter source account name:")
    from_account = console.read_line()

    console.write("Enter destination account name:")
    to_account = console.read_line()

    console.write("Enter transaction amount:")
    amount = parse_amount(console.read_line())
    if amount is None:
        console.write("Invalid amount. Please try again.")
        return

    try:
        ledger.transfer(from_account, to_account, amount)
    except TransactionError as e:
        console.write(f"Error: {e}")
        return
    console.write("Transaction successful!")


def check_balance(ledger: Ledger, console: Console) -> None:
    console.write("Enter account name to check balance:")
    name = console.read_line()

    balance = ledger.balance(name)
    if balance is None:
        console.write("Account not found.")
    else:
        console.write(f"Balance of {name}: {format_balance(balance)}")


HANDLERS: Dict[int, Callable[[Ledger, Console], None]] = {
    1: create_account,
    2: perform_transaction,
    3: check_balance,
}


def run_menu(ledger: Ledger, console: Console) -> None:
    """
    Run the menu loop until the exit choice is entered

    Unparsable choices redisplay the menu silently; numeric choices outside
    the menu are reported as invalid.

    Raises:
        InputReadError: If the input stream cannot be read
    """
    while True:
        for line in MENU_LINES:
            console.write(line)

        choice = parse_choice(console.read_line())
        if choice is None:
            continue
        if choice == EXIT_CHOICE:
            break

        handler = HANDLERS.get(choice)
        if handler is None:
            console.write("Invalid choice. Please try again.")
            continue
        handler(ledger, console)


def main() -> None:
    """Start an interactive session on stdin/stdout"""
    cfg = get_config()
    setup_logging(cfg.log_level, log_format=cfg.log_format, log_file=cfg.log_file)

    ledger = Ledger()
    console = Console()
    log_action(logger, "info", "Session started", action="start_session")

    try:
        run_menu(ledger, console)
    except InputReadError as e:
        logger.critical("Aborting session: %s", e)
        raise SystemExit(str(e)) from e
    except KeyboardInterrupt:
        console.write()
        log_action(logger, "info", "Session interrupted", action="end_session")
        return

    log_action(
        logger, "info", "Session ended", action="end_session",
        extra={"accounts": len(ledger)}
    )


if __name__ == "__main__":
    main()
