"""
Task Grader: grading coding-exercise solutions against test suites

A small grading library that runs a solution through a pluggable execution
strategy for every test case of a task and counts the passing cases.
"""

__version__ = "0.1.0"
