from __future__ import annotations

import pytest

from tusk.test.architecture._gate import require_arch_checks_enabled
from tusk.test.architecture._utils import (
    iter_python_files,
    matches_prefix,
    parse_imports,
    tusk_root,
)

# Each package may only import the packages listed for it (plus itself).
_ALLOWED: dict[str, set[str]] = {
    "core": set(),
    "platform": {"tusk.core"},
    "output": set(),
    "command": set(),
    "objects": set(),
    "git": {"tusk.core", "tusk.platform", "tusk.command", "tusk.objects", "tusk.output"},
}


@pytest.mark.parametrize("package", sorted(_ALLOWED))
def test_library_layers_only_import_lower_layers(package: str) -> None:
    require_arch_checks_enabled()

    root = tusk_root()
    allowed = _ALLOWED[package] | {f"tusk.{package}"}

    offenders: list[str] = []
    for file_path in iter_python_files(root / package):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if not matches_prefix(item.module, "tusk"):
                continue
            if any(matches_prefix(item.module, prefix) for prefix in allowed):
                continue
            offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, f"{package} layering violations:\n" + "\n".join(offenders)


def test_library_does_not_import_typer() -> None:
    require_arch_checks_enabled()

    root = tusk_root()
    offenders: list[str] = []
    for package in _ALLOWED:
        for file_path in iter_python_files(root / package):
            rel = file_path.relative_to(root)
            for item in parse_imports(file_path):
                if matches_prefix(item.module, "typer"):
                    offenders.append(f"{rel}:{item.line}: typer import outside the cli")

    assert not offenders, "CLI dependency leaks:\n" + "\n".join(offenders)
