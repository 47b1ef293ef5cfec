# storefront/utils/money.py
from decimal import Decimal, ROUND_HALF_UP

Money = Decimal

CENT = Decimal("0.01")


def D(x) -> Money:
    return x if isinstance(x, Decimal) else Decimal(str(x or "0"))


def round_money(x) -> Money:
    return D(x).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(x) -> str:
    return f"{round_money(x):.2f}"


def to_minor_units(x) -> int:
    return int((D(x) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(amount: int) -> Money:
    return round_money(Decimal(amount) / 100)
