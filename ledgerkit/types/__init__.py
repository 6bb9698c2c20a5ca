"""Value types shared by drivers and plugins."""

from .address import Address, find_program_address, new_address
from .amount import SOL, Amount, Currency, amount, format_amount, lamports, sol, token

__all__ = [
    "Address",
    "Amount",
    "Currency",
    "SOL",
    "amount",
    "find_program_address",
    "format_amount",
    "lamports",
    "new_address",
    "sol",
    "token",
]
