"""Template segment generation."""

from typing import List, Optional, Sequence, Union

from jsx2htm.compiler.ast_nodes import (
    Child,
    DynamicName,
    Element,
    ElementChild,
    EmptyChild,
    Expression,
    ExpressionChild,
    Fragment,
    HoleExpression,
    Name,
    SourceExpression,
    SpreadChild,
    StaticName,
    StringLiteral,
    TaggedTemplate,
    TextChild,
    Tree,
)
from jsx2htm.compiler.codegen.attributes import serialize_attribute
from jsx2htm.compiler.codegen.segments import TemplateBuffer
from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.escape import encode_text
from jsx2htm.compiler.exceptions import UnsupportedConstruct
from jsx2htm.compiler.whitespace import normalize_text


class TemplateCodegen:
    """Compiles element trees into tagged templates."""

    def __init__(self, config: Optional[CompileConfig] = None) -> None:
        self.config = config or CompileConfig()

    def compile(self, tree: Tree) -> TaggedTemplate:
        """
        Compile one element tree (or fragment) into a tagged template.

        Elements written directly as children share the parent's template;
        element trees inside ``{...}`` become holes holding their own template.
        """
        buffer = TemplateBuffer()
        if isinstance(tree, Fragment):
            self._add_children(self._effective_children(tree.children), buffer)
        elif isinstance(tree, Element):
            self._add_element(tree, buffer)
        else:
            raise TypeError(f"Not an element tree: {tree!r}")
        return buffer.build(self.config.tag)

    def compile_expression(self, expression: Expression) -> HoleExpression:
        """Compile the element trees embedded in a host expression."""
        tree = expression.tree
        if tree is not None:
            return self.compile(tree)

        parts: List[Union[str, TaggedTemplate]] = []
        for part in expression.parts:
            if isinstance(part, str):
                parts.append(part)
            else:
                parts.append(self.compile(part))
        return SourceExpression(tuple(parts))

    def _add_element(self, element: Element, buffer: TemplateBuffer) -> None:
        buffer.text("<")
        self._add_name(element.name, buffer)

        for attr in element.attributes:
            serialize_attribute(attr, buffer, self.compile_expression)

        children = self._effective_children(element.children)
        if not children and not self.config.force_explicit_close:
            buffer.text("/>")
            return

        buffer.text(">")
        self._add_children(children, buffer)
        buffer.text("</")
        self._add_name(element.name, buffer)
        buffer.text(">")

    def _add_name(self, name: Name, buffer: TemplateBuffer) -> None:
        if isinstance(name, StaticName):
            buffer.text(name.value)
        elif isinstance(name, DynamicName):
            buffer.hole(self.compile_expression(name.expression))
        else:
            raise TypeError(f"Unknown tag name: {name!r}")

    def _effective_children(self, children: Sequence[Child]) -> List[Child]:
        """Drop empty containers and text that collapses to nothing."""
        result: List[Child] = []
        for child in children:
            if isinstance(child, EmptyChild):
                continue
            if isinstance(child, TextChild):
                text = normalize_text(child.raw)
                if not text:
                    continue
                child = TextChild(text)
            result.append(child)
        return result

    def _add_children(self, children: List[Child], buffer: TemplateBuffer) -> None:
        for child in children:
            if isinstance(child, TextChild):
                encoded = encode_text(child.raw)
                if isinstance(encoded, StringLiteral):
                    buffer.hole(encoded)
                else:
                    buffer.text(encoded)

            elif isinstance(child, ElementChild):
                self._add_element(child.element, buffer)

            elif isinstance(child, ExpressionChild):
                buffer.hole(self.compile_expression(child.expression))

            elif isinstance(child, SpreadChild):
                raise UnsupportedConstruct(
                    "Spread children are not supported",
                    line=child.expression.line,
                    column=child.expression.column,
                )

            elif isinstance(child, EmptyChild):
                continue

            else:
                raise TypeError(f"Unknown child node: {child!r}")
