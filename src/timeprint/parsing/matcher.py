"""A tiny pattern language for matching fixed-shape date and time text.

Pattern characters:

    #   one decimal digit; a run of ``#`` captures a single number
    +   a mandatory sign, captured as +1 or -1
    -   an optional dash
    =   a mandatory dash
    :   an optional colon

Any other pattern character must appear literally in the text.

Examples:
    >>> match("####-##-##", "2018-02-24", 0)
    (10, [2018, 2, 24])
    >>> match("##:##", "2359", 0)
    (4, [23, 59])
    >>> match("+##", "Z", 0) is None
    True
"""

from __future__ import annotations

Match = tuple[int, list[int]]


def match(pattern: str, text: str, pos: int = 0) -> Match | None:
    """Match *pattern* against *text* starting at *pos*.

    Returns ``(end, captures)`` where *end* is the position just past the
    matched text, or None if the pattern doesn't match. The text is never
    modified, so a failed attempt needs no cleanup before trying another
    pattern at the same position.
    """
    captures: list[int] = []
    i = 0
    while i < len(pattern):
        p = pattern[i]

        if p == "#":
            run = 1
            while i + run < len(pattern) and pattern[i + run] == "#":
                run += 1
            digits = text[pos : pos + run]
            if len(digits) < run or not all("0" <= c <= "9" for c in digits):
                return None
            captures.append(int(digits))
            pos += run
            i += run
            continue

        ch = text[pos] if pos < len(text) else ""

        if p == "+":
            if ch == "+":
                captures.append(1)
            elif ch == "-":
                captures.append(-1)
            else:
                return None
            pos += 1
        elif p in "-:":
            if ch == p:
                pos += 1
        elif p == "=":
            if ch != "-":
                return None
            pos += 1
        else:
            if ch != p:
                return None
            pos += 1
        i += 1

    return pos, captures


def match_all(pattern: str, text: str) -> list[int] | None:
    """Match *pattern* against the whole of *text*; return the captures."""
    result = match(pattern, text)
    if result is None or result[0] != len(text):
        return None
    return result[1]
