"""
Grading of solutions against task test suites.

Each test case input is passed through an execution strategy and the
produced output is compared exactly with the expected output.
"""

from collections.abc import Callable

from .models import ExecutionResult, Solution, Submission, Task, TestCase

ExecutionStrategy = Callable[[Solution, str], str]


def echo_execution(solution: Solution, input_: str) -> str:
    """
    Simulated execution: the actual output is the input itself.

    Args:
        solution: Solution being run (unused).
        input_: Test case input.

    Returns:
        The input unchanged.
    """
    return input_


class Grader:
    """
    Grades solutions using a pluggable execution strategy.
    """

    def __init__(self, execute: ExecutionStrategy = echo_execution) -> None:
        """
        Initialize the grader.

        Args:
            execute: Callable producing the actual output for a solution
                and an input. Defaults to simulated (echo) execution.
        """
        self.execute = execute

    def evaluate(self, solution: Solution, test_case: TestCase) -> ExecutionResult:
        """
        Run a single test case.

        Args:
            solution: Solution to run.
            test_case: Test case providing the input and expected output.

        Returns:
            ExecutionResult with the actual output and pass flag set.
        """
        actual_output = self.execute(solution, test_case.input)
        return ExecutionResult(
            actual_output=actual_output,
            passed=actual_output == test_case.expected,
        )

    def grade_submission(self, solution: Solution, task: Task) -> Submission:
        """
        Grade a solution against every test case of a task.

        Args:
            solution: Solution to grade.
            task: Task whose test suite is run.

        Returns:
            Submission with one result per test case, in suite order,
            and the number of passed cases.
        """
        suite = task.test_suite
        results = list(Submission.allocate(solution, suite.test_count).results)

        total_passed = 0
        for i, test_case in enumerate(suite.tests):
            result = self.evaluate(solution, test_case)
            results[i] = result
            if result.passed:
                total_passed += 1

        return Submission(solution=solution, results=results, total_passed=total_passed)


_default_grader = Grader()


def evaluate(solution: Solution, test_case: TestCase) -> ExecutionResult:
    """Run a single test case with simulated execution."""
    return _default_grader.evaluate(solution, test_case)


def grade_submission(solution: Solution, task: Task) -> Submission:
    """Grade a solution against a task with simulated execution."""
    return _default_grader.grade_submission(solution, task)
