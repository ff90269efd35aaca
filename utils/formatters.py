# Display formatters
from typing import Iterable, Union


def format_code_point(code_point: Union[int, str]) -> str:
    """Format a code point as U+XXXX"""
    if isinstance(code_point, str):
        code_point = ord(code_point)
    return f"U+{code_point:04X}"


def format_code_points(code_points: Iterable[Union[int, str]]) -> str:
    """Space separated U+XXXX list"""
    return " ".join(format_code_point(cp) for cp in code_points)


def format_violation_message(template: str, label: str, chars: str) -> str:
    """Fill a violation message template, empty when nothing was stripped"""
    if not chars:
        return ""
    return template.format(label=label, chars=chars)


def format_current_input(value: str) -> str:
    """Format the live value shown under preview fields"""
    return f"Current input: {value}" if value else "Current input: N/A"
