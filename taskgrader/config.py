"""
Configuration constants for the Task Grader system.
"""

# Description rendering
TEST_CASE_DESCRIPTION_TEMPLATE: str = "Description: {description}, Input: {input}"
VIRTUAL_TASK_PREFIX: str = "Virtual: "
TASK_DETAILS_SEPARATOR: str = " | Details: "

# Console report
SUMMARY_RULE_WIDTH: int = 50
PASSED_MARKER: str = "+"
FAILED_MARKER: str = "-"
