"""
Structure lint tests.
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE = PROJECT_ROOT / "smartlink"

COMPONENTS = ["analytics", "links", "profile", "snapshot", "theme"]
COMPONENT_FILES = ["__init__.py", "_impl.py", "component.py", "models.py", "ports.py"]


class TestProjectStructure:
    """Verify project structure follows the component conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PACKAGE / "core" / "ports").is_dir()
        assert (PACKAGE / "domain").is_dir()
        assert (PACKAGE / "adapters").is_dir()

    def test_shell_directories_exist(self) -> None:
        assert (PACKAGE / "app_shell").is_dir()
        assert (PACKAGE / "api" / "routes").is_dir()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()
        assert (PROJECT_ROOT / "tests" / "api").is_dir()

    def test_components_follow_layout(self) -> None:
        for name in COMPONENTS:
            for filename in COMPONENT_FILES:
                path = PACKAGE / "components" / name / filename
                assert path.is_file(), f"Missing {filename} in component {name}"

    def test_rules_file_present(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_init_files_present(self) -> None:
        """Python packages must have __init__.py files."""
        packages = [
            "smartlink",
            "smartlink/core",
            "smartlink/core/ports",
            "smartlink/domain",
            "smartlink/adapters",
            "smartlink/app_shell",
            "smartlink/api",
            "smartlink/api/routes",
            "smartlink/rules",
            "tests",
            "tests/unit",
            "tests/integration",
            "tests/regression",
            "tests/api",
        ]
        for pkg in packages:
            init_file = PROJECT_ROOT / pkg / "__init__.py"
            assert init_file.is_file(), f"Missing __init__.py in {pkg}"
