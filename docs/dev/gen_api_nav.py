"""Generate API reference pages and a literate-nav summary for tidyseq.

Run by MkDocs through the `mkdocs-gen-files` plugin (see `mkdocs.yml`):

  1) One page per public package under `docs/dev/api/`, listing its
     subpackages and modules, with a mkdocstrings block when the package
     has a module docstring.
  2) One page per public module with a mkdocstrings block.
  3) `docs/dev/api/SUMMARY.md` for `mkdocs-literate-nav`. Links in it are
     relative to `dev/api/`.

Files are parsed with `ast` rather than imported, so building the docs has no
import-time side effects. Names starting with "_" are skipped.
"""

import ast
from pathlib import Path

import mkdocs_gen_files
from mkdocs_gen_files.nav import Nav

SRC_ROOT = Path("src")
PKG_ROOT = SRC_ROOT / "tidyseq"
API_DIR = Path("dev") / "api"
NAV_FILE = API_DIR / "SUMMARY.md"

MKDOCSTRINGS_OPTIONS = [
    "    options:",
    "      show_root_heading: true",
    "      members_order: source",
    "      docstring_style: google",
    "      show_source: false",
    "      filters:",
    "        - '!^_'",
]


def has_module_docstring(py_path: Path) -> bool:
    """Return True if the file parses and has a non-empty module docstring."""
    try:
        tree = ast.parse(py_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return False
    return bool(ast.get_docstring(tree))


def is_public(parts: list[str]) -> bool:
    """Return True when no dotted component is private."""
    return bool(parts) and not any(part.startswith("_") for part in parts)


def mkdocstrings_block(module: str) -> list[str]:
    """Return the `::: module` directive with the shared options."""
    return [f"::: {module}", *MKDOCSTRINGS_OPTIONS]


def package_page(parts: list[str], init: Path) -> str:
    """Build the index page of a package."""
    pkg_dir = init.parent
    modules = sorted(
        m.stem for m in pkg_dir.glob("*.py") if is_public([m.stem]) and m.stem != "__init__"
    )
    packages = sorted(
        d.name
        for d in pkg_dir.iterdir()
        if d.is_dir() and is_public([d.name]) and (d / "__init__.py").exists()
    )
    leaf = parts[-1]
    lines = [f"# `{'.'.join(parts)}`", ""]
    if has_module_docstring(init):
        lines += mkdocstrings_block(".".join(parts))
    if packages:
        lines += ["", "## Subpackages", ""]
        lines += [f"- [{name}]({leaf}/{name}.md)" for name in packages]
    if modules:
        lines += ["", "## Modules", ""]
        lines += [f"- [{name}]({leaf}/{name}.md)" for name in modules]
    return "\n".join(lines) + "\n"


def module_page(parts: list[str]) -> str:
    """Build the page of a single module."""
    module = ".".join(parts)
    return "\n".join([f"# `{module}`", "", *mkdocstrings_block(module), ""])


nav = Nav()

for py in sorted(PKG_ROOT.rglob("*.py")):
    rel = py.relative_to(SRC_ROOT).with_suffix("")
    parts = list(rel.parts[:-1]) if py.name == "__init__.py" else list(rel.parts)
    if not is_public(parts):
        continue
    content = package_page(parts, py) if py.name == "__init__.py" else module_page(parts)
    doc_path = API_DIR / Path(*parts).with_suffix(".md")
    with mkdocs_gen_files.open(doc_path, "w") as fh:
        fh.write(content)
    nav[tuple(parts)] = Path(*parts).with_suffix(".md").as_posix()

with mkdocs_gen_files.open(NAV_FILE, "w") as fh:
    fh.writelines(nav.build_literate_nav())
