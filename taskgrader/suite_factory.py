"""
Factory for building test suites.
"""

from collections.abc import Iterable

from .models import TestCase, TestSuite


class TestSuiteFactory:
    """
    Builds test suites and keeps count of how many it has created.
    """

    __test__ = False

    def __init__(self) -> None:
        self.suites_created = 0

    def create(self, tests: Iterable[TestCase], bonus_count: int = 0) -> TestSuite:
        """
        Create a test suite from the given test cases.

        Args:
            tests: Test cases in suite order. The sequence is copied.
            bonus_count: Advertised bonus tests (display only).

        Returns:
            New TestSuite.
        """
        suite = TestSuite(tests=tuple(tests), bonus_count=bonus_count)
        self.suites_created += 1
        return suite
