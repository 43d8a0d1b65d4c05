"""Literal/hole accumulation for one template."""

from typing import List

from jsx2htm.compiler.ast_nodes import HoleExpression, TaggedTemplate
from jsx2htm.compiler.escape import escape_template


class TemplateBuffer:
    """Collects literal text and holes in document order.

    Literal text is taken unescaped. Consecutive text is joined first and
    escaped as one quasi, so a ``$`` and ``{`` written by different children
    cannot meet as an unescaped ``${``. The result always has exactly one more
    quasi than holes.
    """

    def __init__(self) -> None:
        self._quasis: List[str] = []
        self._current: List[str] = []
        self._expressions: List[HoleExpression] = []

    def text(self, value: str) -> None:
        if value:
            self._current.append(value)

    def hole(self, expression: HoleExpression) -> None:
        self._quasis.append(self._flush())
        self._expressions.append(expression)

    def build(self, tag: str) -> TaggedTemplate:
        quasis = tuple(self._quasis) + (self._flush(),)
        return TaggedTemplate(tag=tag, quasis=quasis, expressions=tuple(self._expressions))

    def _flush(self) -> str:
        quasi = escape_template("".join(self._current))
        self._current = []
        return quasi
