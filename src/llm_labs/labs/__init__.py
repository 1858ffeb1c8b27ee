"""Classroom labs.

Each lab is a module with a ``main(provider=None, reporter=None, ...)``
entry point:
- message_basics.py: building a thread turn by turn
- tokens.py: reported token usage per turn
- tool_calls.py: one tool-call round trip
- temperature.py: low vs high sampling temperature
- prompt_management.py: a compiled prompt template under injection attempts
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from llm_labs.labs import message_basics, prompt_management, temperature, tokens, tool_calls


@dataclass(frozen=True)
class Lab:
    """A runnable lab."""

    id: str
    title: str
    main: Callable[..., Any]


LABS: dict[str, Lab] = {
    lab.id: lab
    for lab in [
        Lab("message-basics", "Build a thread one turn at a time", message_basics.main),
        Lab("tokens", "Token usage reported per turn", tokens.main),
        Lab("tool-calls", "A tool/function call round trip", tool_calls.main),
        Lab("temperature", "Low vs high sampling temperature", temperature.main),
        Lab("prompt-management", "Compiled prompt templates vs injection", prompt_management.main),
    ]
}

__all__ = ["LABS", "Lab"]
