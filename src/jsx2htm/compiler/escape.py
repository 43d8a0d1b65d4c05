"""Character reference decoding and template literal escaping."""

import re
from html.entities import html5
from typing import Tuple, Union

from jsx2htm.compiler.ast_nodes import StringLiteral

# Only terminated references are decoded, matching JSX: "&amp" stays as written.
_CHARACTER_REFERENCE = re.compile(
    r"&(?:#[xX](?P<hex>[0-9a-fA-F]+)|#(?P<dec>[0-9]+)|(?P<name>[A-Za-z][A-Za-z0-9]*));"
)

_MAX_CODE_POINT = 0x10FFFF


def _decode_reference(match: "re.Match[str]") -> str:
    name = match.group("name")
    if name is not None:
        return html5.get(name + ";", match.group(0))

    if match.group("hex") is not None:
        code_point = int(match.group("hex"), 16)
    else:
        code_point = int(match.group("dec"))

    if code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return match.group(0)
    return chr(code_point)


def decode_entities(text: str) -> str:
    """Decode named and numeric character references.

    Unknown names (``&foo;``, ``&ampx;``) and code points outside Unicode are
    left untouched.
    """
    return _CHARACTER_REFERENCE.sub(_decode_reference, text)


def escape_template(text: str) -> str:
    """Escape text for use inside a template literal.

    Escapes: \\ ` ${
    """
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def encode_text(raw: str) -> Union[str, StringLiteral]:
    """Decode child text.

    Returns the decoded text, or a StringLiteral when it contains ``<`` and
    would be read back as markup. Template escaping is left to the buffer.
    """
    text = decode_entities(raw)
    if "<" in text:
        return StringLiteral(text)
    return text


def encode_attribute_value(raw: str) -> Union[Tuple[str, str], StringLiteral]:
    """Decode an attribute value and pick its quote.

    Returns ``(quote, value)``, or a StringLiteral when the value holds a line
    break or both quote characters.
    """
    value = decode_entities(raw)
    has_double = '"' in value
    has_single = "'" in value

    if "\n" in value or "\r" in value or (has_double and has_single):
        return StringLiteral(value)

    quote = "'" if has_double else '"'
    return quote, value
