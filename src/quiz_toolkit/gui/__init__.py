"""Question authoring widgets (PySide6)."""
