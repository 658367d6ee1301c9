"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_AMOUNT_RE = re.compile(r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))(?P<currency>[A-Za-z]+)$")


def parse_amount(amount_str: str) -> tuple[Decimal, str]:
    """Split an amount token into its Decimal value and currency code.

    The number and the currency code must be adjoined:
    - "150.00INR"
    - "150INR"
    - "-20.5EUR"

    Args:
        amount_str: Amount token

    Returns:
        Tuple of (amount, currency)

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()
    match = _AMOUNT_RE.match(amount_str)
    if match is None:
        raise ValueError(
            f"Could not parse amount '{amount_str}': expected a number "
            "immediately followed by a currency code, e.g. 150.00INR"
        )

    try:
        amount = Decimal(match.group("number"))
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    return amount, match.group("currency")


def format_amount(amount: Decimal, currency: str) -> str:
    """Render an amount the way it is written in a ledger, e.g. 740.00INR."""
    if amount == 0:
        amount = abs(amount)
    return f"{amount:f}{currency}"
