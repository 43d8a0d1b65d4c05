import logging
from pathlib import Path

from setuptools import find_packages, setup
from setuptools.command.build_py import build_py

log = logging.getLogger(__name__)

ROOT = Path(__file__).parent


def write_version(version: str) -> None:
    """Record the version so installs from a checkout report it without metadata."""
    version_file = ROOT / "src" / "jsx2htm" / "_version.py"
    content = f'__version__ = "{version}"\n'
    if not version_file.exists() or version_file.read_text("utf-8") != content:
        log.info(f"Writing {version_file.name}: {version}")
        version_file.write_text(content, "utf-8")


class BuildPy(build_py):
    def run(self):
        write_version(self.distribution.get_version())
        super().run()


setup(
    name="jsx2htm",
    version="0.3.0",
    description="Compile JSX element trees into tagged template literals",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "click>=8.1",
        "rich>=13.0",
        "rich-click>=1.7",
        "tree-sitter>=0.23",
        "tree-sitter-typescript>=0.23",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "jsx2htm=jsx2htm.cli.main:cli",
        ],
    },
    cmdclass={
        "build_py": BuildPy,
    },
    zip_safe=False,
)
