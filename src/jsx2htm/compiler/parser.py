"""JSX host program backed by tree-sitter."""

from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from jsx2htm.compiler.ast_nodes import (
    Attribute,
    BooleanAttribute,
    Child,
    Element,
    ElementChild,
    EmptyChild,
    Expression,
    ExpressionAttribute,
    ExpressionChild,
    Fragment,
    Name,
    SpreadAttribute,
    SpreadChild,
    StringAttribute,
    TaggedTemplate,
    TextChild,
    Tree,
)
from jsx2htm.compiler.codegen.printer import print_template
from jsx2htm.compiler.exceptions import JsxSyntaxError, UnsupportedConstruct
from jsx2htm.compiler.tags import classify_tag

TREE_TYPES = {"jsx_element", "jsx_self_closing_element"}

# Children that interrupt a run of text; everything else between the tags
# (jsx_text, character references, whitespace) is taken as raw source.
SIGNIFICANT_CHILD_TYPES = TREE_TYPES | {"jsx_expression"}

# Tokens a line break may not be removed after: comments run to the end of the
# line, and a line break after these keywords ends the statement.
NO_UNWRAP_AFTER = {"comment", "return", "yield", "throw"}


@lru_cache(maxsize=1)
def get_language() -> Language:
    """TSX grammar; a superset of JSX that also accepts type annotations."""
    return Language(tsts.language_tsx())


def _content(node: Node) -> List[Node]:
    """Named children, ignoring comments."""
    return [c for c in node.named_children if c.type != "comment"]


def _unwrap_before(text: str) -> str:
    """Collapse a trailing run with a line break to one space, or none after an opener."""
    kept = text.rstrip()
    run = text[len(kept):]
    if "\n" not in run and "\r" not in run:
        return text
    if not kept or kept[-1] in "([{":
        return kept
    return kept + " "


def _unwrap_after(text: str) -> str:
    """Collapse a leading run with a line break to one space, or none before a closer."""
    kept = text.lstrip()
    run = text[: len(text) - len(kept)]
    if "\n" not in run and "\r" not in run:
        return text
    if not kept or kept[0] in ")]},;":
        return kept
    return " " + kept


class JsxDocument:
    """A JavaScript/TypeScript module whose JSX can be replaced in place.

    Implements the HostTree interface: roots are the outermost JSX
    expressions, and replacements are spliced into the original text so that
    code outside the element trees is left byte for byte.
    """

    def __init__(self, text: str, file_path: str = "") -> None:
        self.text = text
        self.file_path = file_path
        self._source = text.encode("utf-8")
        self._replacements: List[Tuple[int, int, TaggedTemplate]] = []
        self.tree = Parser(get_language()).parse(self._source)
        self._check_syntax()

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    # === HostTree ===

    def roots(self) -> List[Node]:
        return list(self._find_trees(self.root_node))

    def read(self, root: Node) -> Tree:
        target = self._as_tree(root)
        if target is None:
            raise ValueError(f"Node {root.type} is not an element tree")
        return self._map_tree(target)

    def replace(self, root: Node, template: TaggedTemplate) -> None:
        self._replacements.append((root.start_byte, root.end_byte, template))

    def render(self) -> str:
        """Source text with every replaced root printed as a tagged template."""
        out = []
        cursor = 0
        for start, end, template in sorted(self._replacements, key=lambda r: r[0]):
            out.append(self._slice(cursor, start))
            out.append(print_template(template))
            cursor = end
        out.append(self._slice(cursor, len(self._source)))
        return "".join(out)

    # === Traversal ===

    def _check_syntax(self) -> None:
        if not self.root_node.has_error:
            return

        stack = [self.root_node]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                line, column = self._location(node)
                raise JsxSyntaxError(
                    "Could not parse source", self.file_path, line, column
                )
            stack.extend(reversed(node.children))

        raise JsxSyntaxError("Could not parse source", self.file_path)

    def _as_tree(self, node: Node) -> Optional[Node]:
        """The JSX node this expression is, looking through parentheses."""
        if node.type in TREE_TYPES:
            return node
        if node.type == "parenthesized_expression":
            inner = _content(node)
            if len(inner) == 1:
                return self._as_tree(inner[0])
        return None

    def _find_trees(self, node: Node) -> Iterator[Node]:
        """Outermost element-tree expressions under (and including) node."""
        if self._as_tree(node) is not None:
            yield node
            return
        for child in node.children:
            yield from self._find_trees(child)

    # === Mapping ===

    def _map_tree(self, node: Node) -> Tree:
        line, column = self._location(node)

        if node.type == "jsx_self_closing_element":
            return Element(
                name=self._map_name(node),
                attributes=self._map_attributes(node),
                line=line,
                column=column,
            )

        open_tag = node.child_by_field_name("open_tag") or node.children[0]
        close_tag = node.child_by_field_name("close_tag") or node.children[-1]
        children = self._map_children(node, open_tag, close_tag)

        if open_tag.child_by_field_name("name") is None:
            return Fragment(children=children, line=line, column=column)

        return Element(
            name=self._map_name(open_tag),
            attributes=self._map_attributes(open_tag),
            children=children,
            explicit_close=True,
            line=line,
            column=column,
        )

    def _map_name(self, tag: Node) -> Name:
        name_node = tag.child_by_field_name("name")
        if name_node is None:
            raise UnsupportedConstruct(
                "Element has no tag name", self.file_path, *self._location(tag)
            )
        line, column = self._location(name_node)
        try:
            return classify_tag(self._node_text(name_node), line, column)
        except UnsupportedConstruct as e:
            raise e.with_file(self.file_path) from None

    def _map_attributes(self, tag: Node) -> Tuple[Attribute, ...]:
        attributes: List[Attribute] = []
        for child in tag.named_children:
            if child.type == "jsx_attribute":
                attributes.append(self._map_attribute(child))
            elif child.type == "jsx_expression":
                attributes.append(self._map_spread_attribute(child))
        return tuple(attributes)

    def _map_attribute(self, node: Node) -> Attribute:
        parts = _content(node)
        name = self._node_text(parts[0])
        if len(parts) == 1:
            return BooleanAttribute(name)

        value = parts[1]
        line, column = self._location(value)

        if value.type == "string":
            raw = self._node_text(value)
            return StringAttribute(name, raw[1:-1], raw[0])

        if value.type == "jsx_expression":
            inner = _content(value)
            if not inner:
                return ExpressionAttribute(name, None, line, column)
            if inner[0].type == "spread_element":
                raise UnsupportedConstruct(
                    f"Attribute '{name}' cannot take a spread value",
                    self.file_path,
                    line,
                    column,
                )
            return ExpressionAttribute(name, self._expression(inner[0]), line, column)

        if value.type in TREE_TYPES:
            tree = self._map_tree(value)
            return ExpressionAttribute(name, Expression((tree,), line, column), line, column)

        raise UnsupportedConstruct(
            f"Unsupported value for attribute '{name}': {value.type}",
            self.file_path,
            line,
            column,
        )

    def _map_spread_attribute(self, node: Node) -> SpreadAttribute:
        inner = _content(node)
        if not inner or inner[0].type != "spread_element":
            raise UnsupportedConstruct(
                "Expected a spread attribute ({...props})",
                self.file_path,
                *self._location(node),
            )
        return SpreadAttribute(self._expression(_content(inner[0])[0]))

    def _map_children(
        self, node: Node, open_tag: Node, close_tag: Node
    ) -> Tuple[Child, ...]:
        children: List[Child] = []
        cursor = open_tag.end_byte

        for child in node.children:
            if child.type not in SIGNIFICANT_CHILD_TYPES:
                continue
            if child.start_byte < open_tag.end_byte or child.end_byte > close_tag.start_byte:
                continue

            if child.start_byte > cursor:
                children.append(TextChild(self._slice(cursor, child.start_byte)))
            cursor = child.end_byte

            if child.type == "jsx_expression":
                children.append(self._map_expression_child(child))
                continue

            tree = self._map_tree(child)
            if isinstance(tree, Fragment):
                children.extend(tree.children)
            else:
                children.append(ElementChild(tree))

        if close_tag.start_byte > cursor:
            children.append(TextChild(self._slice(cursor, close_tag.start_byte)))

        return tuple(children)

    def _map_expression_child(self, node: Node) -> Child:
        inner = _content(node)
        if not inner:
            return EmptyChild()
        if inner[0].type == "spread_element":
            return SpreadChild(self._expression(_content(inner[0])[0]))
        return ExpressionChild(self._expression(inner[0]))

    def _expression(self, node: Node) -> Expression:
        """Host source of node, with the element trees inside it mapped.

        A line break that only wraps a nested tree onto its own line is
        collapsed, so ``map(item =>\\n  <li/>\\n)`` reads ``map(item => <li/>)``.
        """
        parts: list = []
        cursor = node.start_byte
        after_tree = False
        for span in self._find_trees(node):
            text = self._slice(cursor, span.start_byte)
            if after_tree:
                text = _unwrap_after(text)
            if self._can_unwrap_before(span):
                text = _unwrap_before(text)
            if text:
                parts.append(text)
            parts.append(self._map_tree(self._as_tree(span)))
            cursor = span.end_byte
            after_tree = True

        text = self._slice(cursor, node.end_byte)
        if after_tree:
            text = _unwrap_after(text)
        if text:
            parts.append(text)

        line, column = self._location(node)
        return Expression(tuple(parts), line, column)

    def _can_unwrap_before(self, span: Node) -> bool:
        current = span
        while current.prev_sibling is None and current.parent is not None:
            current = current.parent
        previous = current.prev_sibling
        return previous is not None and previous.type not in NO_UNWRAP_AFTER

    # === Helpers ===

    def _slice(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8")

    def _node_text(self, node: Node) -> str:
        return self._slice(node.start_byte, node.end_byte)

    def _location(self, node: Node) -> Tuple[int, int]:
        row, column = node.start_point[0], node.start_point[1]
        return row + 1, column + 1
