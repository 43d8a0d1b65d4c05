"""Transform a directory of sources."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.imports import inject_import
from jsx2htm.compiler.transform import transform_source

log = logging.getLogger(__name__)

SOURCE_SUFFIXES = {".jsx": ".js", ".tsx": ".ts", ".js": ".js", ".mjs": ".mjs"}


@dataclass
class BuildSummary:
    files: int
    templates: int
    out_dir: Path


class SourceBuilder:
    def __init__(
        self,
        src_dir: Path,
        out_dir: Path,
        config: Optional[CompileConfig] = None,
        import_module: Optional[str] = None,
        import_export: Optional[str] = None,
    ) -> None:
        self.src_dir = src_dir.resolve()
        self.out_dir = out_dir.resolve()
        self.config = config or CompileConfig()
        self.import_module = import_module
        self.import_export = import_export
        self._file_count = 0
        self._template_count = 0

    def build(self) -> BuildSummary:
        if self.out_dir == self.src_dir or self.src_dir in self.out_dir.parents:
            raise ValueError("Output directory must not be inside the source directory")

        if self.out_dir.exists():
            shutil.rmtree(self.out_dir)
        self.out_dir.mkdir(parents=True)

        for path in sorted(self.src_dir.rglob("*")):
            if not path.is_file() or path.suffix not in SOURCE_SUFFIXES:
                continue
            parts = path.relative_to(self.src_dir).parts
            if any(part.startswith(".") or part == "node_modules" for part in parts):
                continue
            self._build_file(path)

        return BuildSummary(
            files=self._file_count,
            templates=self._template_count,
            out_dir=self.out_dir,
        )

    def _build_file(self, path: Path) -> None:
        relative = path.relative_to(self.src_dir)
        target = self.out_dir / relative.with_suffix(SOURCE_SUFFIXES[path.suffix])

        code = path.read_text(encoding="utf-8")
        result = transform_source(code, self.config, file_path=str(relative))

        output = result.code
        if result.templates and self.import_module:
            output = inject_import(
                output, self.config.tag, self.import_module, self.import_export
            )

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(output, encoding="utf-8")
        log.debug("Wrote %s", target)

        self._file_count += 1
        self._template_count += result.templates


def build_project(
    src_dir: Path,
    out_dir: Path,
    config: Optional[CompileConfig] = None,
    import_module: Optional[str] = None,
    import_export: Optional[str] = None,
) -> BuildSummary:
    """Transform every JSX/TSX/JS source under src_dir into out_dir."""
    if not src_dir.is_dir():
        raise ValueError(f"Source directory not found: {src_dir}")

    builder = SourceBuilder(src_dir, out_dir, config, import_module, import_export)
    return builder.build()
