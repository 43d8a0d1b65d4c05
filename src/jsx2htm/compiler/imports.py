"""Import injection for the template tag.

Kept apart from the compiler: the compiler only reports the tag identifier
it used, this module decides where it comes from.
"""

import re
from typing import Optional

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def build_import(tag: str, module: str, export: Optional[str] = None) -> str:
    """``import { export as tag } from "module";``"""
    export = export or tag
    for name in (tag, export):
        if not _IDENTIFIER.match(name):
            raise ValueError(f"Not a valid identifier: {name!r}")

    binding = tag if export == tag else f"{export} as {tag}"
    module_literal = module.replace("\\", "\\\\").replace('"', '\\"')
    return f'import {{ {binding} }} from "{module_literal}";'


def inject_import(code: str, tag: str, module: str, export: Optional[str] = None) -> str:
    """Prepend the tag import to a module, after a shebang line if any."""
    statement = build_import(tag, module, export)

    if code.startswith("#!"):
        shebang, _, rest = code.partition("\n")
        return f"{shebang}\n{statement}\n\n{rest}"

    return f"{statement}\n\n{code}"
