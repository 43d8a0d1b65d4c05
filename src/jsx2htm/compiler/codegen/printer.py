"""Render tagged templates as JavaScript source."""

import json

from jsx2htm.compiler.ast_nodes import (
    HoleExpression,
    SourceExpression,
    StringLiteral,
    TaggedTemplate,
)


def print_expression(expression: HoleExpression) -> str:
    if isinstance(expression, TaggedTemplate):
        return print_template(expression)
    if isinstance(expression, StringLiteral):
        return json.dumps(expression.value, ensure_ascii=False)
    if isinstance(expression, SourceExpression):
        return "".join(
            part if isinstance(part, str) else print_template(part)
            for part in expression.parts
        )
    raise TypeError(f"Unknown hole expression: {expression!r}")


def print_template(template: TaggedTemplate) -> str:
    """Render ``tag`q0${e0}q1...```."""
    out = [template.tag, "`", template.quasis[0]]
    for expression, quasi in zip(template.expressions, template.quasis[1:]):
        out.append("${")
        out.append(print_expression(expression))
        out.append("}")
        out.append(quasi)
    out.append("`")
    return "".join(out)
