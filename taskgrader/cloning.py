"""
Copy helpers for tasks.
"""

from .models import Task


def shallow_copy(task: Task) -> Task:
    """Copy a task, sharing the same test suite object."""
    return task.model_copy()


def deep_copy(task: Task) -> Task:
    """Copy a task together with its test suite and test cases."""
    return task.model_copy(deep=True)
