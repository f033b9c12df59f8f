"""
Display rendering for test cases and tasks.

Variant presentation (annotated inputs, detailed and virtual tasks) is
carried as data on the models and rendered here by plain functions.
"""

from .config import TASK_DETAILS_SEPARATOR, TEST_CASE_DESCRIPTION_TEMPLATE, VIRTUAL_TASK_PREFIX
from .models import DescriptionStyle, Task, TestCase


def render_input(test_case: TestCase) -> str:
    """
    Render a test case input for display.

    Args:
        test_case: Test case to render.

    Returns:
        The annotated input when the test case has a description,
        otherwise the raw input.
    """
    if test_case.description is None:
        return test_case.input
    return TEST_CASE_DESCRIPTION_TEMPLATE.format(
        description=test_case.description,
        input=test_case.input,
    )


def render_description(task: Task) -> str:
    """
    Render a task description for display.

    Virtual tasks are prefixed, and details (if any) are appended.

    Args:
        task: Task to render.

    Returns:
        Rendered description string.
    """
    description = task.description
    if task.style == DescriptionStyle.VIRTUAL:
        description = VIRTUAL_TASK_PREFIX + description
    if task.details is not None:
        description += TASK_DETAILS_SEPARATOR + task.details
    return description
