"""Entry point for ``python -m banking_ledger``"""

from .cli import main


if __name__ == "__main__":
    main()
