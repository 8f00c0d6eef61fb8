"""External tool integrations.

- formatters: ESLint and Prettier invocation through a package runner
"""

from fmtwizard.integrations.formatters import FORMATTER_COMMANDS, RunResult, RunStatus, run_formatters, run_tool

__all__ = [
    "FORMATTER_COMMANDS",
    "RunResult",
    "RunStatus",
    "run_formatters",
    "run_tool",
]
