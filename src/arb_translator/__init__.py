"""LLM-backed batch translator for ARB localization resource files."""

__version__ = "1.0.0"
