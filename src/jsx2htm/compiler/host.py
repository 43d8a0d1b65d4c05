"""Interface between the compiler and the program hosting the element trees."""

from typing import Any, Iterable, Protocol

from jsx2htm.compiler.ast_nodes import TaggedTemplate, Tree


class HostTree(Protocol):
    """What the driver needs from a host program.

    Root handles are opaque to the compiler; only the host knows what they are.
    """

    def roots(self) -> Iterable[Any]:
        """Outermost element-tree expressions, in document order."""
        ...

    def read(self, root: Any) -> Tree:
        """Classified view of one root."""
        ...

    def replace(self, root: Any, template: TaggedTemplate) -> None:
        """Substitute the compiled template for the root expression."""
        ...
