# src/identity_kit/archive/tabs.py

DEFAULT_TAB_WIDTH = 8


def leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


def expand_indentation(prefix: str, tab_width: int) -> int:
    """
    Column reached after `prefix`, counting from zero.

    - A space moves one column
    - A tab (or other whitespace) moves to the next tab stop, always at
      least one column further
    """
    if tab_width < 1:
        raise ValueError("tab_width must be >= 1")

    column = 0
    for char in prefix:
        if char == " ":
            column += 1
        else:
            column = (column // tab_width) * tab_width + tab_width
    return column
