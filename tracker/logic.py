import math
import re
from datetime import datetime, timezone


CURRENCY_SYMBOL = "₹"
NO_DATE_LABEL = "No date"
INVALID_DATE_LABEL = "Invalid Date"

# Longest numeric prefix accepted by JavaScript's parseFloat.
_FLOAT_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_DATE_ONLY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_float(s: str) -> float:
    match = _FLOAT_PREFIX_RE.match(s.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def split_name_field(raw: str) -> tuple[str, str]:
    """Split the combined "<price> <label>" input on its first space.

    "20000 mobile" -> ("20000", "mobile"); with no space the whole value is
    the price token and the label is empty.
    """
    token = raw.split(" ")[0]
    return token, raw[len(token) + 1 :]


def coerce_price(value) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError("price required")
    if isinstance(value, (int, float)):
        try:
            price = float(value)
        except OverflowError as e:
            raise ValueError("price must be a finite number") from e
    elif isinstance(value, str):
        if not value.strip():
            raise ValueError("price required")
        try:
            price = float(value)
        except ValueError as e:
            raise ValueError("price must be a number") from e
    else:
        raise ValueError("price must be a number")
    if not math.isfinite(price):
        raise ValueError("price must be a finite number")
    return price


def coerce_text(value, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{field} must be text")


def compute_balance(transactions) -> float:
    return sum((txn.price for txn in transactions), 0)


def amount_color(value) -> str:
    return "red" if value < 0 else "green"


def format_amount(value) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def format_date_time(value: str | None) -> str:
    if not value:
        return NO_DATE_LABEL
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE_LABEL
    if _DATE_ONLY_RE.fullmatch(value):
        # Bare dates are UTC midnight, as in JavaScript's Date parser.
        parsed = parsed.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return (
        f"{parsed.month}/{parsed.day}/{parsed.year}, "
        f"{hour}:{parsed.minute:02d}:{parsed.second:02d} {meridiem}"
    )
