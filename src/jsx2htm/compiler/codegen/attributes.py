"""Attribute serialization."""

from typing import Callable

from jsx2htm.compiler.ast_nodes import (
    Attribute,
    BooleanAttribute,
    Expression,
    ExpressionAttribute,
    HoleExpression,
    SpreadAttribute,
    StringAttribute,
    StringLiteral,
)
from jsx2htm.compiler.codegen.segments import TemplateBuffer
from jsx2htm.compiler.escape import encode_attribute_value
from jsx2htm.compiler.exceptions import UnsupportedConstruct

CompileExpression = Callable[[Expression], HoleExpression]


def serialize_attribute(
    attr: Attribute, buffer: TemplateBuffer, compile_expression: CompileExpression
) -> None:
    """Write one attribute, preceded by a space, contributing at most one hole."""
    buffer.text(" ")

    if isinstance(attr, BooleanAttribute):
        buffer.text(attr.name)

    elif isinstance(attr, StringAttribute):
        encoded = encode_attribute_value(attr.value)
        buffer.text(f"{attr.name}=")
        if isinstance(encoded, StringLiteral):
            buffer.hole(encoded)
        else:
            quote, value = encoded
            buffer.text(f"{quote}{value}{quote}")

    elif isinstance(attr, ExpressionAttribute):
        if attr.expression is None:
            raise UnsupportedConstruct(
                f"Attribute '{attr.name}' must be assigned a non-empty expression",
                line=attr.line,
                column=attr.column,
            )
        buffer.text(f"{attr.name}=")
        buffer.hole(compile_expression(attr.expression))

    elif isinstance(attr, SpreadAttribute):
        buffer.text("...")
        buffer.hole(compile_expression(attr.expression))

    else:
        raise TypeError(f"Unknown attribute node: {attr!r}")
