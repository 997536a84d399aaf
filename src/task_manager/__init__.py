"""Task Manager: CRUD REST API for task records."""

__version__ = "0.1.0"
