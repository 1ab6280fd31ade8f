"""Domain normalization helpers."""


def normalize_account_name(name: str | None) -> str | None:
    """Upper-case the first letter of an account name.

    Args:
        name: Raw account name.

    Returns:
        str | None: Name with its first character upper-cased, the rest
        left untouched.
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


__all__ = ["normalize_account_name"]
