from enum import Enum
from typing import Literal
from pydantic import BaseModel, Field

class ChatMode(str, Enum):
    """Assistant configurations selectable in the chat overlay"""
    STANDARD = "standard"
    FAST = "fast"
    THINKING = "thinking"

    @property
    def label(self) -> str:
        return {
            ChatMode.FAST: "Fast",
            ChatMode.THINKING: "Deep Think",
        }.get(self, "Chat")

class ChatMessage(BaseModel):
    """One turn of the chat transcript"""
    id: str = Field(description="Message identifier")
    role: Literal["user", "model"] = Field(description="Who sent the message")
    text: str = Field(description="Message body")

    def to_content(self) -> dict:
        """Gemini content entry for this turn"""
        return {"role": self.role, "parts": [{"text": self.text}]}
