"""
Pydantic models for the Task Grader system.

Defines the data types for test cases, suites, tasks, solutions,
per-test execution results and graded submissions.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DescriptionStyle(str, Enum):
    """How a task description is rendered for display."""

    PLAIN = "plain"
    VIRTUAL = "virtual"


class TestCase(BaseModel):
    """
    A single (input, expected output) pair used to validate a solution.

    Attributes:
        input: Input passed to the solution.
        expected: Exact output the solution must produce.
        description: Optional annotation shown when rendering the input.
    """

    __test__ = False
    model_config = ConfigDict(frozen=True)

    input: str = Field(..., description="Input passed to the solution")
    expected: str = Field(..., description="Expected output, compared exactly")
    description: str | None = Field(default=None, description="Optional annotation for display")


class TestSuite(BaseModel):
    """
    Ordered collection of test cases bound to a task.

    Attributes:
        tests: Test cases in insertion order.
        bonus_count: Extra tests advertised for display only; never graded.
    """

    __test__ = False
    model_config = ConfigDict(frozen=True)

    tests: tuple[TestCase, ...] = Field(default=(), description="Test cases in suite order")
    bonus_count: int = Field(default=0, ge=0, description="Advertised bonus tests")

    @property
    def test_count(self) -> int:
        return len(self.tests)

    @property
    def advertised_count(self) -> int:
        """Test count including the bonus tests, as shown to users."""
        return self.test_count + self.bonus_count


class Task(BaseModel):
    """
    A problem statement paired with its test suite.

    The suite is held by reference, so several tasks may share one suite.

    Attributes:
        description: Problem statement.
        test_suite: Suite the solution is graded against.
        details: Optional extra details appended when rendering.
        style: Rendering style of the description.
    """

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Problem statement")
    test_suite: TestSuite = Field(..., description="Suite the solution is graded against")
    details: str | None = Field(default=None, description="Extra details for display")
    style: DescriptionStyle = Field(default=DescriptionStyle.PLAIN, description="Description rendering style")


class Solution(BaseModel):
    """Opaque solution artifact submitted for grading."""

    code: str = Field(..., description="Solution source or executable reference")


class ExecutionResult(BaseModel):
    """
    Outcome of running one test case.

    Attributes:
        actual_output: Output produced by the solution, None until set.
        passed: Whether the actual output matched the expected output.
    """

    actual_output: str | None = Field(default=None, description="Output produced by the solution")
    passed: bool = Field(default=False, description="Whether the output matched exactly")


class Submission(BaseModel):
    """
    One solution's results against a task's test suite.

    Frozen once built: grading fills a placeholder result list and then
    constructs the final submission from it.

    Attributes:
        solution: The graded solution.
        results: One result per test case, in suite order.
        total_passed: Number of passed results.
    """

    model_config = ConfigDict(frozen=True)

    solution: Solution = Field(..., description="The graded solution")
    results: list[ExecutionResult] = Field(default_factory=list, description="Results in suite order")
    total_passed: int = Field(default=0, ge=0, description="Number of passed results")

    @model_validator(mode="after")
    def _check_total_passed(self) -> "Submission":
        passed = self.count_passed()
        if self.total_passed != passed:
            raise ValueError(
                f"total_passed ({self.total_passed}) does not match number of passed results ({passed})"
            )
        return self

    @classmethod
    def allocate(cls, solution: Solution, test_count: int) -> "Submission":
        """
        Create a submission pre-populated with empty placeholder results.

        Args:
            solution: The solution being graded.
            test_count: Number of test cases in the suite.

        Returns:
            Submission with `test_count` empty results and total_passed = 0.

        Raises:
            ValueError: If test_count is negative.
        """
        if test_count < 0:
            raise ValueError(f"test_count must be non-negative, got {test_count}")
        return cls(
            solution=solution,
            results=[ExecutionResult() for _ in range(test_count)],
        )

    def count_passed(self) -> int:
        return sum(1 for result in self.results if result.passed)
