"""Append-only conversation thread.

The thread is the entire model context on every call, so its order matters.
Turns can only be appended, and a tool turn is accepted only when a prior
assistant turn in the same thread requested its tool-call id.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Any, overload

from llm_labs.core.errors import ValidationError
from llm_labs.providers.base import (
    AssistantTurn,
    ChatTurn,
    SystemTurn,
    ToolTurn,
    UserTurn,
    turn_to_openai_format,
)

_TURN_TYPES = (SystemTurn, UserTurn, AssistantTurn, ToolTurn)


class Thread:
    """Ordered, append-only list of chat turns."""

    def __init__(self, turns: Iterable[ChatTurn] = ()) -> None:
        self._turns: list[ChatTurn] = []
        self._requested_ids: set[str] = set()
        for turn in turns:
            self.append(turn)

    def append(self, turn: ChatTurn) -> ChatTurn:
        """Append a turn, enforcing the tool-call id invariant.

        Raises:
            ValidationError: If the turn is not a chat turn, or is a tool turn
                whose id no earlier assistant turn requested.
        """
        if not isinstance(turn, _TURN_TYPES):
            raise ValidationError("Only chat turns can be appended", field="turn", value=turn)
        if isinstance(turn, ToolTurn) and turn.tool_call_id not in self._requested_ids:
            raise ValidationError(
                "Tool turn does not answer a tool call requested earlier in the thread",
                field="tool_call_id",
                value=turn.tool_call_id,
            )
        if isinstance(turn, AssistantTurn):
            self._requested_ids.update(tc.id for tc in turn.tool_calls)
        self._turns.append(turn)
        return turn

    def system(self, content: str) -> SystemTurn:
        turn = SystemTurn(content)
        self.append(turn)
        return turn

    def user(self, content: str) -> UserTurn:
        turn = UserTurn(content)
        self.append(turn)
        return turn

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        """Read-only snapshot of the turns."""
        return tuple(self._turns)

    def with_turn(self, turn: ChatTurn) -> list[ChatTurn]:
        """The turns plus one extra, without appending it."""
        return [*self._turns, turn]

    def to_openai_messages(self) -> list[dict[str, Any]]:
        return [turn_to_openai_format(turn) for turn in self._turns]

    def to_json(self, indent: int = 2) -> str:
        """Dump the thread the way it is sent, including tool-call fields."""
        return json.dumps(self.to_openai_messages(), indent=indent, ensure_ascii=False)

    def transcript(self) -> list[dict[str, Any]]:
        """Role/message pairs for a compact classroom dump."""
        return [{"role": turn.role.value, "message": turn.content} for turn in self._turns]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(self._turns)

    @overload
    def __getitem__(self, index: int) -> ChatTurn: ...

    @overload
    def __getitem__(self, index: slice) -> list[ChatTurn]: ...

    def __getitem__(self, index: int | slice) -> ChatTurn | list[ChatTurn]:
        return self._turns[index]

    def __repr__(self) -> str:
        roles = ", ".join(turn.role.value for turn in self._turns)
        return f"Thread([{roles}])"
