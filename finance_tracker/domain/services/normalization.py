"""Domain normalization helpers."""


def normalize_symbol(symbol: str | None) -> str:
    """Normalize ticker symbols.

    Args:
        symbol: Raw symbol typed by the user or read from storage.

    Returns:
        str: Upper-cased symbol without surrounding whitespace.
    """
    if not symbol:
        return ""
    return symbol.strip().upper()


def normalize_text(value: str | None) -> str:
    """Strip free-text values, mapping None to an empty string."""
    if not value:
        return ""
    return value.strip()


def normalize_optional_text(value: str | None) -> str | None:
    """Strip optional text values, mapping blanks to None."""
    cleaned = normalize_text(value)
    return cleaned or None


__all__ = ["normalize_symbol", "normalize_text", "normalize_optional_text"]
