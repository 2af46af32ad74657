# unimatch/utils/helpers.py


def is_blank(text: str) -> bool:
    """
    True for None, empty or whitespace-only strings.
    """
    return not (text or "").strip()


def format_percent(value: float) -> str:
    """
    Render a 0-100 score with exactly one decimal place, e.g. 85 -> '85.0%'.
    """
    return f"{value:.1f}%"
