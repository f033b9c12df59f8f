"""
Task Grader: grade a solution against configured coding tasks

Usage:
  main.py [--config=PATH] [--verbose]
  main.py (-h | --help)

Options:
  --config=PATH  Path to YAML configuration file [default: grader_config.yml].
  --verbose      Print per-test results.
  -h --help      Show this screen.
"""

import sys
from pathlib import Path

import yaml
from docopt import docopt

from taskgrader.config_loader import GraderConfig, build_tasks, load_config
from taskgrader.grader import Grader
from taskgrader.models import Solution, Submission
from taskgrader.rendering import render_description
from taskgrader.report import calculate_statistics, print_submission_summary
from taskgrader.suite_factory import TestSuiteFactory


def run_grading_pipeline(config: GraderConfig, verbose: bool = False) -> list[Submission]:
    """
    Grade the configured solution against every configured task.

    Args:
        config: Loaded grader configuration.
        verbose: Print per-test results.

    Returns:
        List of Submission objects, one per task.
    """
    factory = TestSuiteFactory()
    tasks = build_tasks(config, factory)
    print(f"Built {len(tasks)} tasks ({factory.suites_created} test suites)")

    if not tasks:
        print("No tasks configured!")
        return []

    grader = Grader()
    solution = Solution(code=config.solution)
    results: list[Submission] = []

    for i, task in enumerate(tasks, 1):
        suite = task.test_suite
        print(f"\n[{i}/{len(tasks)}] {render_description(task)}")
        if suite.bonus_count:
            print(f"  Advertised tests: {suite.advertised_count} ({suite.bonus_count} bonus)")

        submission = grader.grade_submission(solution, task)
        print(f"  Passed: {submission.total_passed}/{suite.test_count}")

        if verbose:
            print_submission_summary(task, submission)
        results.append(submission)

    statistics = calculate_statistics(results)

    print("\n" + "=" * 60)
    print("GRADING COMPLETE")
    print("=" * 60)
    print(f"Tasks graded: {statistics['total_submissions']}")
    print(
        f"Tests passed: {statistics['total_passed']}/{statistics['total_tests']} "
        f"({statistics['pass_rate_percent']:.1f}%)"
    )
    print(f"Fully passed tasks: {statistics['fully_passed_count']}")

    return results


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entrypoint.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for error).
    """
    arguments = docopt(__doc__, argv=argv)
    config_path = Path(arguments["--config"])

    if not config_path.exists():
        print(f"Error: Configuration file not found at {config_path}")
        return 1

    try:
        config = load_config(config_path)
        print(f"Loaded configuration from {config_path}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}")
        return 1

    run_grading_pipeline(config, verbose=arguments["--verbose"] or config.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
