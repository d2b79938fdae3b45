"""In-memory todo list API and its client view."""

__version__ = "1.0.0"
