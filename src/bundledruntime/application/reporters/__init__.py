"""Reporters for runtime build results.

ConsoleReporter renders with rich; JSONReporter uses stdlib only.
"""

from bundledruntime.application.reporters.console import ConsoleConfig, ConsoleReporter
from bundledruntime.application.reporters.json_reporter import JSONReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
