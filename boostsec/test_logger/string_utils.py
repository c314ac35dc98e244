"""Helpers for dot separated names."""


def substring_before_dot(name: str | None) -> str:
    """Return everything before the last dot, or "" when there is none."""
    if not name:
        return ""

    idx = name.rfind(".")
    if idx != -1:
        return name[:idx]

    return ""


def substring_after_dot(name: str | None) -> str:
    """Return everything after the last dot, or the whole name when there is none."""
    if not name:
        return ""

    idx = name.rfind(".")
    if idx != -1:
        return name[idx + 1 :]

    return name
