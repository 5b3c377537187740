"""In-memory university registry of faculties, groups and students, with an interactive shell."""

__version__ = "0.1.0"
__all__ = ["__version__"]