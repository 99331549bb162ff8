"""Line-oriented CSV tokenizing for bulk uploads.

Fields may be wrapped in double quotes to carry commas; a doubled quote
inside quotes is a literal quote. A field never spans physical lines.
"""
from firmdesk.services.etl.errors import UnbalancedQuoteError


def tokenize_line(line: str, strict: bool = False) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    if in_quotes and strict:
        raise UnbalancedQuoteError(line)
    # an unmatched quote just leaves the rest of the line quoted
    fields.append("".join(current).strip())
    return fields


def split_lines(text: str) -> list[str]:
    return [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]


def is_blank(line: str) -> bool:
    return not line.strip()


def is_empty_row(fields: list[str]) -> bool:
    return all(not f for f in fields)
