"""Chat message type."""
from __future__ import annotations

from dataclasses import dataclass

from ai_content_writer.types.enums import Role


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    role: Role
    content: str

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role=Role.SYSTEM, content=text)

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role=Role.USER, content=text)

    def to_dict(self) -> dict[str, str]:
        return {"role": str(self.role), "content": self.content}
