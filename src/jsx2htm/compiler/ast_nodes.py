"""Element tree and tagged template node definitions."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


# === Input: element trees read from the host program ===


@dataclass(frozen=True)
class Expression:
    """Host source for an embedded expression.

    ``parts`` holds verbatim host source interleaved with the element trees
    written inside it, e.g. ``items.map(i => <li/>)`` is
    ``("items.map(i => ", <Element li>, ")")``.
    """

    parts: Tuple[Union[str, "Element", "Fragment"], ...]
    line: int = 0
    column: int = 0

    @property
    def tree(self) -> Optional[Union["Element", "Fragment"]]:
        """The element tree this expression evaluates to, if it is one."""
        if len(self.parts) == 1 and isinstance(self.parts[0], (Element, Fragment)):
            return self.parts[0]
        return None


@dataclass(frozen=True)
class StaticName:
    value: str


@dataclass(frozen=True)
class DynamicName:
    expression: Expression


Name = Union[StaticName, DynamicName]


@dataclass(frozen=True)
class BooleanAttribute:
    name: str


@dataclass(frozen=True)
class StringAttribute:
    name: str
    value: str  # raw source, character references not yet decoded
    quote: str = '"'


@dataclass(frozen=True)
class ExpressionAttribute:
    name: str
    expression: Optional[Expression]  # None for an empty container: a={}
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class SpreadAttribute:
    expression: Expression


Attribute = Union[BooleanAttribute, StringAttribute, ExpressionAttribute, SpreadAttribute]


@dataclass(frozen=True)
class TextChild:
    raw: str


@dataclass(frozen=True)
class ExpressionChild:
    expression: Expression


@dataclass(frozen=True)
class ElementChild:
    element: "Element"


@dataclass(frozen=True)
class EmptyChild:
    """An expression container holding nothing but comments."""


@dataclass(frozen=True)
class SpreadChild:
    expression: Expression


Child = Union[TextChild, ExpressionChild, ElementChild, EmptyChild, SpreadChild]


@dataclass(frozen=True)
class Element:
    name: Name
    attributes: Tuple[Attribute, ...] = ()
    children: Tuple[Child, ...] = ()
    explicit_close: bool = False
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Fragment:
    children: Tuple[Child, ...] = ()
    line: int = 0
    column: int = 0


Tree = Union[Element, Fragment]


# === Output: tagged template literals ===


@dataclass(frozen=True)
class StringLiteral:
    """A host string literal produced by demoting unsafe text."""

    value: str


@dataclass(frozen=True)
class SourceExpression:
    """Verbatim host source with nested element trees already compiled."""

    parts: Tuple[Union[str, "TaggedTemplate"], ...]


HoleExpression = Union[SourceExpression, StringLiteral, "TaggedTemplate"]


@dataclass(frozen=True)
class TaggedTemplate:
    """tag`quasi0${expr0}quasi1...` - always one more quasi than expressions."""

    tag: str
    quasis: Tuple[str, ...] = ("",)
    expressions: Tuple[HoleExpression, ...] = field(default=())

    def __post_init__(self) -> None:
        if len(self.quasis) != len(self.expressions) + 1:
            raise ValueError(
                f"Tagged template needs {len(self.expressions) + 1} quasis, "
                f"got {len(self.quasis)}"
            )
