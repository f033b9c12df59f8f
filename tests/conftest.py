"""Shared fixtures for the Task Grader tests."""

import pytest

from taskgrader.models import Solution, Task, TestCase, TestSuite


@pytest.fixture
def solution() -> Solution:
    return Solution(code="print(input())")


@pytest.fixture
def mixed_suite() -> TestSuite:
    return TestSuite(
        tests=[
            TestCase(input="abc", expected="abc"),
            TestCase(input="abc", expected="xyz"),
            TestCase(input="Hello", expected="hello"),
            TestCase(input="42", expected="42"),
        ]
    )


@pytest.fixture
def mixed_task(mixed_suite: TestSuite) -> Task:
    return Task(description="Echo task", test_suite=mixed_suite)
