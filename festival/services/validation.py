def is_present(value) -> bool:
    """A required field: only null, false, 0 and "" count as missing."""
    if value is None or isinstance(value, bool):
        return value is True
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True
