"""Placeholder translation between the model's syntax and printf-style formats.

The strings model keeps placeholders in the Apple style (`%@`, `%1$@`); Java
derived formats such as Tizen and Android spell string substitutions `%s`.
"""

from __future__ import annotations

import re

IOS_STRING_PLACEHOLDER_RE = re.compile(r"%([0-9$]*)@")
PRINTF_STRING_PLACEHOLDER_RE = re.compile(r"%([0-9$]*)s")
LEADING_AT_RE = re.compile(r"^@ ")
LEADING_ESCAPED_AT_RE = re.compile(r"^\\@ ")


def iosify_substitutions(text: str) -> str:
    text = PRINTF_STRING_PLACEHOLDER_RE.sub(r"%\1@", text)
    return LEADING_ESCAPED_AT_RE.sub("@ ", text, count=1)


def count_unnumbered_substitutions(text: str) -> int | None:
    """Count `%x` substitutions; None when any is already positional."""
    count = 0
    after_percent = False
    for ch in text:
        if after_percent:
            if ch == "%":
                pass
            elif ch.isdigit():
                return None
            else:
                count += 1
            after_percent = False
        elif ch == "%":
            after_percent = True
    return count


def number_substitutions(text: str) -> str:
    out: list[str] = []
    position = 1
    after_percent = False
    for ch in text:
        if after_percent:
            if ch != "%":
                out.append(f"{position}$")
                position += 1
            after_percent = False
        elif ch == "%":
            after_percent = True
        out.append(ch)
    return "".join(out)


def androidify_substitutions(text: str) -> str:
    text = IOS_STRING_PLACEHOLDER_RE.sub(r"%\1s", text)
    text = LEADING_AT_RE.sub(r"\\@ ", text, count=1)

    count = count_unnumbered_substitutions(text)
    if count is None or count <= 1:
        return text
    return number_substitutions(text)
