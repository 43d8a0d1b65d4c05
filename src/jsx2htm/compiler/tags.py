"""Tag name classification."""

from jsx2htm.compiler.ast_nodes import DynamicName, Expression, Name, StaticName
from jsx2htm.compiler.exceptions import UnsupportedConstruct


def is_static_tag(name: str) -> bool:
    """Lowercase and custom-element (hyphenated) names are markup vocabulary."""
    if "." in name:
        return False
    return ("a" <= name[:1] <= "z") or "-" in name


def classify_tag(name: str, line: int = 0, column: int = 0) -> Name:
    """Classify tag source text as a literal markup name or a scope reference."""
    if ":" in name:
        raise UnsupportedConstruct(
            f"Namespaced tag <{name}> cannot be represented in a template",
            line=line,
            column=column,
        )
    if is_static_tag(name):
        return StaticName(name)
    return DynamicName(Expression((name,), line=line, column=column))
