def to_uppercase(value: str | None) -> str | None:
    """
    Strip and upper-case a setting value, leaving None untouched.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Strip and lower-case a setting value, leaving None untouched.
    """
    if value is None:
        return None
    return value.strip().lower()
