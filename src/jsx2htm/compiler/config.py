"""Compile options."""

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_TAG = "html"


@dataclass(frozen=True)
class CompileConfig:
    """Options for one compilation pass.

    Attributes:
        tag: Identifier used as the template tag (``html`` -> html`...`).
        force_explicit_close: Emit ``<div></div>`` instead of ``<div/>``
            for elements without children.
    """

    tag: str = DEFAULT_TAG
    force_explicit_close: bool = False

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("tag identifier must not be empty")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "CompileConfig":
        """Build a config from plugin-style options ({"tag": ..., "html": ...})."""
        unknown = set(options) - {"tag", "html", "force_explicit_close"}
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        force = options.get("force_explicit_close", options.get("html", False))
        return cls(tag=options.get("tag", DEFAULT_TAG), force_explicit_close=bool(force))
