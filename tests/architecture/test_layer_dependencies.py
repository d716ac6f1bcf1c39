"""
Architecture tests to enforce DDD layer boundaries.

Rules enforced:
- domain/ imports only the standard library and itself
- application/ cannot import infrastructure/*
- infrastructure/ can import application/ and domain/
- shared/ imports no other layer
"""

import ast
import os
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).parent.parent.parent / "src"
LAYERS = ["domain", "application", "infrastructure", "shared"]


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    python_files = []
    if not directory.exists():
        return python_files

    for root, dirs, files in os.walk(directory):
        # Skip __pycache__ directories
        dirs[:] = [d for d in dirs if d != "__pycache__"]

        for file in files:
            if file.endswith(".py"):
                python_files.append(Path(root) / file)

    return python_files


def extract_imports(file_path: Path) -> set[str]:
    """Extract all absolute import statements from a Python file."""
    imports = set()

    try:
        with open(file_path, encoding="utf-8") as f:
            content = f.read()

        tree = ast.parse(content)

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    imports.add(alias.name)
            elif isinstance(node, ast.ImportFrom):
                # Relative imports stay inside the same package
                if node.level > 0:
                    continue

                if node.module:
                    imports.add(node.module)

    except (SyntaxError, UnicodeDecodeError) as e:
        pytest.fail(f"Failed to parse {file_path}: {e}")

    return imports


def layer_of(import_name: str) -> str | None:
    """Return the layer an import belongs to, if any."""
    for layer in LAYERS:
        if import_name == f"src.{layer}" or import_name.startswith(f"src.{layer}."):
            return layer
    return None


def is_framework_import(import_name: str) -> bool:
    """Check if an import is from a third-party library (violating domain purity)."""
    framework_prefixes = [
        "structlog",  # Even logging frameworks should be abstracted
        "yaml",
        "jsonschema",
        "pytest",
        "hypothesis",
    ]
    return any(import_name.split(".")[0] == prefix for prefix in framework_prefixes)


class TestDomainLayerPurity:
    """Test that domain layer has no framework dependencies."""

    def test_domain_has_no_framework_imports(self):
        """Domain layer must not import any framework code."""
        domain_path = SRC_PATH / "domain"

        violations = []
        for file_path in get_python_files(domain_path):
            for import_name in extract_imports(file_path):
                if is_framework_import(import_name):
                    relative_path = file_path.relative_to(SRC_PATH)
                    violations.append(f"{relative_path}: imports {import_name}")

        if violations:
            violation_list = "\n".join(violations)
            pytest.fail(
                f"Domain layer has {len(violations)} framework import violations:\n{violation_list}"
            )

    def test_domain_imports_only_standard_library(self):
        """Domain layer should only import standard library modules and itself."""
        domain_path = SRC_PATH / "domain"

        allowed_prefixes = [
            "typing",
            "dataclasses",
            "enum",
            "functools",
            "logging",
            "re",
            "types",
            "src.domain",
        ]

        violations = []
        for file_path in get_python_files(domain_path):
            for import_name in extract_imports(file_path):
                if any(import_name.startswith(prefix) for prefix in allowed_prefixes):
                    continue
                relative_path = file_path.relative_to(SRC_PATH)
                violations.append(f"{relative_path}: imports {import_name}")

        if violations:
            violation_list = "\n".join(violations)
            pytest.fail(
                f"Domain layer has {len(violations)} non-standard library imports:\n{violation_list}"
            )


class TestApplicationLayerBoundaries:
    """Test that application layer respects boundaries."""

    def test_application_does_not_import_infrastructure(self):
        """Application layer must not import infrastructure layer."""
        application_path = SRC_PATH / "application"

        violations = []
        for file_path in get_python_files(application_path):
            for import_name in extract_imports(file_path):
                if layer_of(import_name) == "infrastructure":
                    relative_path = file_path.relative_to(SRC_PATH)
                    violations.append(f"{relative_path}: imports {import_name}")

        if violations:
            violation_list = "\n".join(violations)
            pytest.fail(
                f"Application layer has {len(violations)} infrastructure import violations:\n{violation_list}"
            )


class TestInfrastructureLayerCompliance:
    """Test that infrastructure layer depends inward."""

    def test_infrastructure_imports_domain_or_application(self):
        """Infrastructure adapters should implement application ports."""
        infrastructure_files = get_python_files(SRC_PATH / "infrastructure")

        if not infrastructure_files:
            pytest.skip("No infrastructure files found")

        inward_imports = 0
        for file_path in infrastructure_files:
            for import_name in extract_imports(file_path):
                if layer_of(import_name) in ("domain", "application"):
                    inward_imports += 1

        if inward_imports == 0:
            pytest.fail(
                "Infrastructure layer exists but doesn't import from domain or application layers."
            )


class TestCircularDependencies:
    """Test that there are no circular dependencies between layers."""

    def test_no_circular_dependencies(self):
        """Ensure no circular dependencies exist between architectural layers."""
        layer_imports = {}

        for layer in LAYERS:
            layer_imports[layer] = set()
            for file_path in get_python_files(SRC_PATH / layer):
                for import_name in extract_imports(file_path):
                    other_layer = layer_of(import_name)
                    if other_layer and other_layer != layer:
                        layer_imports[layer].add(other_layer)

        # Dependency hierarchy:
        # domain -> (none)
        # application -> domain, shared
        # infrastructure -> domain, application, shared
        # shared -> (none, but can be imported by all but domain)
        allowed = {
            "domain": set(),
            "application": {"domain", "shared"},
            "infrastructure": {"domain", "application", "shared"},
            "shared": set(),
        }

        violations = [
            f"{layer} layer imports: {deps - allowed[layer]}"
            for layer, deps in layer_imports.items()
            if deps - allowed[layer]
        ]

        if violations:
            violation_list = "\n".join(violations)
            pytest.fail(f"Architecture violations found:\n{violation_list}")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
