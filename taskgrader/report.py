"""
Console reporting for graded submissions.

Formats per-submission summaries and computes aggregate statistics
over several submissions.
"""

from .config import FAILED_MARKER, PASSED_MARKER, SUMMARY_RULE_WIDTH
from .models import Submission, Task
from .rendering import render_description, render_input


def format_submission_summary(task: Task, submission: Submission) -> str:
    """
    Format a summary of a graded submission.

    Args:
        task: Task the submission was graded against.
        submission: Graded submission.

    Returns:
        Multi-line summary string.
    """
    rule = "=" * SUMMARY_RULE_WIDTH
    lines = [
        f"  {rule}",
        f"  Task: {render_description(task)}",
        f"  Tests Passed: {submission.total_passed}/{len(submission.results)}",
        f"  {rule}",
    ]

    for test_case, result in zip(task.test_suite.tests, submission.results):
        status = PASSED_MARKER if result.passed else FAILED_MARKER
        lines.append(f"  [{status}] {render_input(test_case)} -> {result.actual_output!r}")

    return "\n".join(lines)


def print_submission_summary(task: Task, submission: Submission) -> None:
    """
    Print a summary of a graded submission to console.

    Args:
        task: Task the submission was graded against.
        submission: Graded submission.
    """
    print(format_submission_summary(task, submission))
    print()


def calculate_statistics(submissions: list[Submission]) -> dict:
    """
    Calculate summary statistics for graded submissions.

    Args:
        submissions: Graded submissions.

    Returns:
        Dictionary with statistics, empty if there are no submissions.
    """
    if not submissions:
        return {}

    total_tests = sum(len(s.results) for s in submissions)
    total_passed = sum(s.total_passed for s in submissions)
    fully_passed = sum(1 for s in submissions if s.total_passed == len(s.results))

    return {
        "total_submissions": len(submissions),
        "total_tests": total_tests,
        "total_passed": total_passed,
        "pass_rate_percent": (total_passed / total_tests) * 100 if total_tests else 0.0,
        "fully_passed_count": fully_passed,
    }
