"""Pytest fixtures for govaddress tests."""

import ast
import re
from pathlib import Path

import pytest

from govaddress import Address, Entity, EntityCollection, Role

# Test modules reach govaddress only through the package root and the
# click commands, so a test never pins an internal module path.
ALLOWED_IMPORT_PATTERNS = [
    r"^govaddress$",  # Public API root
    r"^govaddress\.cli(\..+)?$",  # CLI module and submodules
]


def _is_allowed_import(module_name: str) -> bool:
    """Check if a govaddress import is allowed."""
    if not module_name.startswith("govaddress"):
        return True  # Not a govaddress import, always allowed
    return any(re.match(pattern, module_name) for pattern in ALLOWED_IMPORT_PATTERNS)


def _check_file_imports(filepath: Path) -> list[str]:
    """Check a test file for disallowed internal imports.

    Returns list of error messages for any violations found.
    """
    try:
        content = filepath.read_text()
        tree = ast.parse(content)
    except (SyntaxError, UnicodeDecodeError):
        return []  # Skip files that can't be parsed

    errors = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if not _is_allowed_import(alias.name):
                    errors.append(
                        f"{filepath}:{node.lineno}: "
                        f"Internal import not allowed: 'import {alias.name}'. "
                        f"Use 'from govaddress import ...' instead."
                    )
        elif isinstance(node, ast.ImportFrom):
            if node.module and not _is_allowed_import(node.module):
                names = ", ".join(a.name for a in node.names)
                errors.append(
                    f"{filepath}:{node.lineno}: "
                    f"Internal import not allowed: 'from {node.module} import {names}'. "
                    f"Use 'from govaddress import ...' instead."
                )
    return errors


def pytest_collect_file(parent, file_path):
    """Check test files for internal imports during collection."""
    if file_path.suffix == ".py" and file_path.name.startswith("test_"):
        errors = _check_file_imports(file_path)
        if errors:
            # Raise an error during collection to fail fast
            error_msg = "\n".join(errors)
            pytest.fail(
                f"\n\nInternal import violations detected:\n{error_msg}\n\n"
                "Tests should only import from the public API:\n"
                "  - from govaddress import AddressExtractor, LineEditor, ...\n"
                "  - from govaddress.cli.commands import cli  (for CLI tests)\n"
            )


@pytest.fixture
def house_page_lines():
    """Raw text nodes from a House member's offices page."""
    return [
        "Washington, D.C. Office",
        "1022 Longworth House Office Building",
        "Washington, DC 20515",
        "Phone: (202) 225-3701",
        "Syracuse Office",
        "440 South Warren Street",
        "Suite 706",
        "Syracuse, NY 13202",
        "Phone: (315) 423-5657",
        "Office Hours: 9:00 AM - 5:00 PM",
        "Privacy Policy",
    ]


@pytest.fixture
def dc_address():
    return Address(
        address1="1022 LONGWORTH HOB",
        city="WASHINGTON",
        state="DC",
        zip="20515",
    )


@pytest.fixture
def district_address():
    return Address(
        address1="440 SOUTH WARREN STREET",
        address2="SUITE 706",
        city="SYRACUSE",
        state="NY",
        zip="13202",
    )


@pytest.fixture
def sample_collection():
    """A small House collection with nothing resolved yet."""
    return EntityCollection(
        name="U.S. House of Representatives",
        role=Role.POLITICAL,
        entities=[
            Entity("Jane", "Doe", url="https://doe.house.gov"),
            Entity("John", "Roe", url="https://roe.house.gov"),
        ],
    )
