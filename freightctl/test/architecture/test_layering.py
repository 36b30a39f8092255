from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    return [p for p in sorted(base.rglob("*.py")) if "__pycache__" not in p.parts]


def parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if node.level and node.level > 0:
                continue
            if node.module is None:
                continue
            imports.append(ImportRef(module=node.module, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _offenders(base: Path, forbidden: tuple[str, ...], *, skip: set[str] | None = None) -> list[str]:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(base):
        rel = file_path.relative_to(root)
        if rel.parts and rel.parts[0] == "test":
            continue
        if skip and str(rel) in skip:
            continue
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders


def test_services_do_not_import_cli_or_typer() -> None:
    offenders = _offenders(package_root() / "services", ("freightctl.cli", "typer"))
    assert not offenders, "services -> cli dependency violations:\n" + "\n".join(offenders)


def test_core_and_api_stay_below_services() -> None:
    root = package_root()
    forbidden = ("freightctl.services", "freightctl.cli", "freightctl.output")
    offenders = _offenders(root / "core", forbidden) + _offenders(root / "api", forbidden)
    assert not offenders, "layering violations:\n" + "\n".join(offenders)


def test_direct_rich_imports_are_limited_to_console() -> None:
    offenders = _offenders(package_root(), ("rich",), skip={"output/console.py"})
    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
