"""
Configuration loader for the Task Grader system.

Handles parsing and validation of YAML configuration files and
builds the configured tasks.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .models import DescriptionStyle, Task, TestCase
from .suite_factory import TestSuiteFactory


class TestCaseConfig(BaseModel):
    """
    Configuration of a single test case.
    """

    __test__ = False

    input: str = Field(..., description="Input passed to the solution")
    expected: str = Field(..., description="Expected output")
    description: str | None = Field(None, description="Optional annotation for display")


class TaskConfig(BaseModel):
    """
    Configuration of a task and its test suite.
    """

    description: str = Field(..., description="Problem statement")
    details: str | None = Field(None, description="Extra details appended to the description")
    style: DescriptionStyle = Field(DescriptionStyle.PLAIN, description="Description rendering style")
    bonus_tests: int = Field(0, ge=0, description="Advertised bonus tests (display only)")
    tests: list[TestCaseConfig] = Field(default_factory=list, description="Test cases in suite order")


class GraderConfig(BaseModel):
    """
    Configuration model for the grader.
    """

    solution: str = Field("", description="Solution artifact graded against every task")
    tasks: list[TaskConfig] = Field(default_factory=list, description="Tasks to grade")
    verbose: bool = Field(False, description="Enable verbose output")


def load_config(config_path: Path) -> GraderConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        GraderConfig object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
        ValidationError: If config data is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if not config_data:
        return GraderConfig()

    return GraderConfig(**config_data)


def build_tasks(config: GraderConfig, factory: TestSuiteFactory) -> list[Task]:
    """
    Build tasks from configuration, one test suite per task.

    Args:
        config: Loaded grader configuration.
        factory: Factory used to create the test suites.

    Returns:
        List of Task objects in configuration order.
    """
    tasks: list[Task] = []
    for task_config in config.tasks:
        suite = factory.create(
            (
                TestCase(input=t.input, expected=t.expected, description=t.description)
                for t in task_config.tests
            ),
            bonus_count=task_config.bonus_tests,
        )
        tasks.append(
            Task(
                description=task_config.description,
                test_suite=suite,
                details=task_config.details,
                style=task_config.style,
            )
        )
    return tasks
