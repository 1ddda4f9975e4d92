"""Display formatting for the es-ES locale.

Every function here is total: bad input is echoed back or rendered the way a
browser would ("NaN"), never raised.
"""

import math
import re
import secrets
import string
from datetime import date, datetime
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

DateLike = Union[date, datetime, str]
Number = Union[int, float, Decimal]

MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]
SHORT_MONTHS = [
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sept", "oct", "nov", "dic",
]

NBSP = "\u00a0"
ELLIPSIS = "..."

_SLUG_TRANSLATION = str.maketrans(
    {
        **dict.fromkeys("áàäâ", "a"),
        **dict.fromkeys("éèëê", "e"),
        **dict.fromkeys("íìïî", "i"),
        **dict.fromkeys("óòöô", "o"),
        **dict.fromkeys("úùüû", "u"),
        "ñ": "n",
    }
)

_ID_ALPHABET = string.digits + string.ascii_lowercase


# ─────────────────────────────────────────────────────────────────────────────
# Numbers
# ─────────────────────────────────────────────────────────────────────────────


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("NaN")


def _non_finite(value: Decimal) -> str:
    if value.is_nan():
        return "NaN"
    return "-∞" if value.is_signed() else "∞"


def _group_thousands(digits: str) -> str:
    """Insert '.' every three digits; es-ES leaves four-digit numbers alone."""
    if len(digits) < 5:
        return digits
    groups = []
    while digits:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    return ".".join(groups)


def _format_decimal(value: Decimal, max_fraction: int) -> str:
    with localcontext() as ctx:
        # Room for every integer digit plus the kept fraction
        ctx.prec = max(28, value.adjusted() + max_fraction + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        quantum = Decimal(1).scaleb(-max_fraction)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{rounded.copy_abs():f}".partition(".")
    fraction = fraction.rstrip("0")
    text = _group_thousands(integer)
    if fraction:
        text += "," + fraction
    return sign + text


def format_currency(amount: Number) -> str:
    """Format euros without decimals, e.g. 15000 → '15.000 €'."""
    value = _to_decimal(amount)
    if not value.is_finite():
        return f"{_non_finite(value)}{NBSP}€"
    return f"{_format_decimal(value, 0)}{NBSP}€"


def format_number(num: Number) -> str:
    """Group thousands with '.', up to three decimals after a comma."""
    value = _to_decimal(num)
    if not value.is_finite():
        return _non_finite(value)
    return _format_decimal(value, 3)


def format_percentage(value: float) -> str:
    """Signed percentage with one decimal: 5.5 → '+5.5%', -3.2 → '-3.2%'."""
    value = float(value) + 0.0  # -0.0 → 0.0
    if math.isnan(value):
        return "NaN%"
    if math.isinf(value):
        return "+Infinity%" if value > 0 else "-Infinity%"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


# ─────────────────────────────────────────────────────────────────────────────
# Dates
# ─────────────────────────────────────────────────────────────────────────────


def parse_date(value: DateLike) -> Optional[datetime]:
    """Turn a date, datetime or ISO-8601 string into a local datetime.

    Returns None when the string is not ISO-8601.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None

    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt


def format_date(value: DateLike) -> str:
    """Long date: '15 de marzo de 2024'."""
    dt = parse_date(value)
    if dt is None:
        return str(value)
    return f"{dt.day} de {MONTHS[dt.month - 1]} de {dt.year}"


def format_short_date(value: DateLike) -> str:
    """Short date: '15/03/2024'."""
    dt = parse_date(value)
    if dt is None:
        return str(value)
    return f"{dt.day:02d}/{dt.month:02d}/{dt.year}"


def format_relative_time(value: DateLike, now: Optional[datetime] = None) -> str:
    """Elapsed time in Spanish ('hace 5 min'), or '15 mar' after a week."""
    target = parse_date(value)
    if target is None:
        return str(value)

    if now is None:
        now = datetime.now(target.tzinfo)
    elif now.tzinfo is not None and target.tzinfo is None:
        now = now.astimezone().replace(tzinfo=None)
    elif now.tzinfo is None and target.tzinfo is not None:
        target = target.replace(tzinfo=None)

    seconds = math.floor((now - target).total_seconds())

    if seconds < 60:
        return "hace un momento"
    if seconds < 3600:
        return f"hace {seconds // 60} min"
    if seconds < 86400:
        return f"hace {seconds // 3600}h"
    if seconds < 604800:
        return f"hace {seconds // 86400} días"
    return f"{target.day} {SHORT_MONTHS[target.month - 1]}"


# ─────────────────────────────────────────────────────────────────────────────
# Strings
# ─────────────────────────────────────────────────────────────────────────────


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending in '...' when shortened."""
    if len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return text[: max(max_length, 0)]
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def slugify(text: str) -> str:
    """URL slug: 'Año Nuevo Español' → 'ano-nuevo-espanol'."""
    slug = text.lower().translate(_SLUG_TRANSLATION)
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    return slug.strip("-")


def generate_id(length: int = 13) -> str:
    """Random base-36 identifier for client-side records."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
