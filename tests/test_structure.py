"""
Structure lint tests.

Verify that the atomic component skeleton exists and follows conventions.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["classifier", "metadata", "render", "preview", "shell"]


class TestProjectStructure:
    def test_layers_exist(self) -> None:
        for layer in ["adapters", "api", "app_shell", "components", "domain", "ports", "rules"]:
            assert (PROJECT_ROOT / "src" / layer).is_dir(), f"Missing src/{layer}"

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    @pytest.mark.parametrize("name", COMPONENTS)
    def test_component_layout(self, name: str) -> None:
        """Each component has models, a component entry point and unit tests."""
        root = PROJECT_ROOT / "src" / "components" / name
        for filename in ["__init__.py", "models.py", "component.py"]:
            assert (root / filename).is_file(), f"{name}: missing {filename}"
        assert (root / "tests" / "test_unit.py").is_file(), f"{name}: missing unit tests"

