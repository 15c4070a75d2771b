"""Database models for the todo API."""

from .task import Base, Task

__all__ = ["Base", "Task"]
