"""Todo API - REST backend for user accounts and per-user todo lists."""

__version__ = "1.0.0"
