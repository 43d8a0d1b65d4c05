try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("jsx2htm")
    except PackageNotFoundError:
        __version__ = "unknown"

from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.exceptions import (
    Jsx2HtmError,
    JsxSyntaxError,
    UnsupportedConstruct,
)
from jsx2htm.compiler.imports import inject_import
from jsx2htm.compiler.transform import TransformResult, transform, transform_source

__all__ = [
    "CompileConfig",
    "Jsx2HtmError",
    "JsxSyntaxError",
    "UnsupportedConstruct",
    "TransformResult",
    "inject_import",
    "transform",
    "transform_source",
]
