"""Tests for grading solutions against task test suites."""

from pydantic import ValidationError
import pytest

from taskgrader.grader import Grader, echo_execution, evaluate, grade_submission
from taskgrader.models import Solution, Task, TestCase, TestSuite


def test_evaluate_matching_input_passes(solution: Solution) -> None:
    result = evaluate(solution, TestCase(input="abc", expected="abc"))
    assert result.passed is True
    assert result.actual_output == "abc"


def test_evaluate_mismatch_fails_with_input_as_output(solution: Solution) -> None:
    result = evaluate(solution, TestCase(input="abc", expected="xyz"))
    assert result.passed is False
    assert result.actual_output == "abc"


def test_evaluate_is_case_sensitive(solution: Solution) -> None:
    assert evaluate(solution, TestCase(input="ABC", expected="abc")).passed is False


def test_evaluate_does_not_trim(solution: Solution) -> None:
    assert evaluate(solution, TestCase(input="abc ", expected="abc")).passed is False
    assert evaluate(solution, TestCase(input="abc\n", expected="abc")).passed is False


def test_evaluate_uses_raw_input_not_annotation(solution: Solution) -> None:
    case = TestCase(input="input1", expected="input1", description="Description1")
    result = evaluate(solution, case)
    assert result.actual_output == "input1"
    assert result.passed is True


def test_echo_execution_returns_input(solution: Solution) -> None:
    assert echo_execution(solution, "some input") == "some input"


def test_grade_submission_results_follow_suite_order(solution: Solution, mixed_task: Task) -> None:
    submission = grade_submission(solution, mixed_task)
    assert len(submission.results) == mixed_task.test_suite.test_count
    assert [r.actual_output for r in submission.results] == ["abc", "abc", "Hello", "42"]
    assert [r.passed for r in submission.results] == [True, False, False, True]


def test_grade_submission_counts_passed(solution: Solution, mixed_task: Task) -> None:
    submission = grade_submission(solution, mixed_task)
    assert submission.total_passed == 2
    assert submission.total_passed == submission.count_passed()


def test_grade_submission_keeps_solution(solution: Solution, mixed_task: Task) -> None:
    assert grade_submission(solution, mixed_task).solution == solution


def test_grade_submission_empty_suite(solution: Solution) -> None:
    submission = grade_submission(solution, Task(description="Empty", test_suite=TestSuite()))
    assert submission.results == []
    assert submission.total_passed == 0


def test_grade_submission_ignores_bonus_count(solution: Solution) -> None:
    suite = TestSuite(tests=[TestCase(input="a", expected="a")], bonus_count=1)
    submission = grade_submission(solution, Task(description="Advanced", test_suite=suite))
    assert len(submission.results) == 1
    assert submission.total_passed == 1


def test_grade_submission_is_idempotent(solution: Solution, mixed_task: Task) -> None:
    first = grade_submission(solution, mixed_task)
    second = grade_submission(solution, mixed_task)
    assert first == second
    assert first is not second


def test_grader_uses_custom_execution_strategy(solution: Solution) -> None:
    grader = Grader(execute=lambda _solution, input_: input_.upper())
    suite = TestSuite(
        tests=[
            TestCase(input="abc", expected="ABC"),
            TestCase(input="abc", expected="abc"),
        ]
    )
    submission = grader.grade_submission(solution, Task(description="Upper", test_suite=suite))
    assert [r.passed for r in submission.results] == [True, False]
    assert submission.total_passed == 1


def test_grader_passes_solution_to_strategy() -> None:
    seen: list[Solution] = []

    def record(solution: Solution, input_: str) -> str:
        seen.append(solution)
        return input_

    solution = Solution(code="recorded")
    Grader(execute=record).evaluate(solution, TestCase(input="a", expected="a"))
    assert seen == [solution]


def test_graded_submission_is_frozen(solution: Solution, mixed_task: Task) -> None:
    submission = grade_submission(solution, mixed_task)
    with pytest.raises(ValidationError):
        submission.total_passed = 0
