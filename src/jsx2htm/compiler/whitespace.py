"""JSX text whitespace collapsing."""

import re

_LINE_BREAK = re.compile(r"\r\n|\n|\r")
_INLINE_SPACE = " "


def normalize_text(raw: str) -> str:
    """
    Collapse source line wrapping in a run of JSX text.

    In a run with a line break, tabs become spaces. Lines after the first then
    lose their leading spaces, lines before the last lose their trailing
    spaces, and lines left empty are dropped. Whatever remains is joined with
    a single space. Text without a line break is returned as is.

    Example:
        " a \\n "      ->  " a"
        " b \\n B "    ->  " b B "
        "\\n    "      ->  ""
    """
    lines = _LINE_BREAK.split(raw)
    if len(lines) == 1:
        return raw

    last = len(lines) - 1
    kept = []
    for index, line in enumerate(lines):
        line = line.replace("\t", " ")
        if index > 0:
            line = line.lstrip(_INLINE_SPACE)
        if index < last:
            line = line.rstrip(_INLINE_SPACE)
        if line:
            kept.append(line)

    return " ".join(kept)
