"""Replace element trees in a host program with tagged templates."""

import logging
from dataclasses import dataclass
from typing import Optional

from jsx2htm.compiler.codegen.template import TemplateCodegen
from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.exceptions import Jsx2HtmError
from jsx2htm.compiler.host import HostTree
from jsx2htm.compiler.parser import JsxDocument

log = logging.getLogger(__name__)


@dataclass
class TransformResult:
    code: str
    templates: int


def transform(host: HostTree, config: Optional[CompileConfig] = None) -> int:
    """Compile every root element tree of host in place.

    Returns the number of trees replaced. Fails on the first unsupported
    construct; trees already replaced are left replaced.
    """
    codegen = TemplateCodegen(config)
    count = 0
    for root in host.roots():
        tree = host.read(root)
        template = codegen.compile(tree)
        host.replace(root, template)
        log.debug(
            "Compiled tree at %d:%d into %d quasis",
            tree.line,
            tree.column,
            len(template.quasis),
        )
        count += 1
    return count


def transform_source(
    code: str, config: Optional[CompileConfig] = None, file_path: str = ""
) -> TransformResult:
    """Transform JSX in a JavaScript/TypeScript module's source text."""
    try:
        document = JsxDocument(code, file_path)
        count = transform(document, config)
    except Jsx2HtmError as e:
        if file_path and not e.file_path:
            raise e.with_file(file_path) from e
        raise

    if count:
        log.info("%s: compiled %d template(s)", file_path or "<source>", count)
    return TransformResult(code=document.render(), templates=count)
