"""
Walidacja wejscia przed dotknieciem bazy.
"""

# zakres kolumny Integer (id, quantity, user_id)
MAX_INT = 2**31 - 1


def parse_positive_int(value, upper: int = MAX_INT) -> int | None:
    """Dodatnia liczba calkowita z int albo napisu ("5", " 7 "), nie wieksza niz upper; inaczej None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith("+"):
            text = text[1:]
        # isdigit() przepuszcza tez cyfry unicode ("²"), ktorych int() nie parsuje
        if not (text.isascii() and text.isdigit()):
            return None
        try:
            number = int(text)
        except ValueError:
            return None
    else:
        return None
    return number if 0 < number <= upper else None


def parse_payment_method(value) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None
