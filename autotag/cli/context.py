from __future__ import annotations

from collections.abc import Mapping

from autotag.core.config import parse_bool_input
from autotag.output.console import ActionsConsole, ConsoleProtocol, RichConsole


def build_console(env: Mapping[str, str], *, plain: bool = False) -> ConsoleProtocol:
    """Workflow commands inside an Actions runner, Rich everywhere else."""
    if not plain and parse_bool_input(env.get("GITHUB_ACTIONS")):
        return ActionsConsole()
    return RichConsole()
