"""Top-level package for the Quiz Toolkit.

Provides subpackages:
- quiz_toolkit.formatting – code detection and indentation reconstruction
- quiz_toolkit.core – question data model
- quiz_toolkit.importing – question extraction (plain text, PDF, spreadsheet)
- quiz_toolkit.gui – question authoring widgets
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text().splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        return pkg_version("quiz-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
