"""Backslash escape handling.

Structural scanning works on raw offsets and asks ``is_escaped``; only the
literal text that ends up in ``Text`` segments goes through ``unescape``.
"""

from marksome.parsing.charsets import ESCAPABLE


def is_escaped(text: str, index: int) -> bool:
    """Check whether the character at ``index`` is backslash-escaped.

    True iff the run of consecutive backslashes right before ``index``
    has odd length.

    """
    escaped = False
    i = index - 1
    while i >= 0 and text[i] == "\\":
        escaped = not escaped
        i -= 1
    return escaped


def unescape(text: str) -> str:
    """Remove escaping backslashes in front of markup characters.

    Only ``\\*``, ``\\_``, ``\\[``, ``\\]`` and ``\\\\`` are resolved; any
    other backslash sequence is left untouched.

    Example:
        >>> unescape(r"\\*foo\\* \\n")
        '*foo* \\\\n'

    """
    if "\\" not in text:
        return text

    parts: list[str] = []
    pos = 0
    length = len(text)
    while True:
        slash = text.find("\\", pos)
        if slash == -1 or slash + 1 >= length:
            break
        if text[slash + 1] in ESCAPABLE:
            parts.append(text[pos:slash])
            parts.append(text[slash + 1])
            pos = slash + 2
        else:
            parts.append(text[pos : slash + 2])
            pos = slash + 2
    parts.append(text[pos:])
    return "".join(parts)
