"""Chat overlay state mirrored to local storage"""
import json
import logging
from datetime import datetime
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from mind_it.models.chat import ChatMessage, ChatMode
from mind_it.services.chat import GeminiChatProxy
from mind_it.services.database import LocalStore
from mind_it.services.errors import StorageError

logger = logging.getLogger(__name__)

TRANSCRIPT_KEY = "mindit_chat_history"
GREETING_TEXT = "Hi! I am your Mind It assistant. How are you feeling today?"

_transcript_adapter = TypeAdapter(List[ChatMessage])

def greeting() -> ChatMessage:
    return ChatMessage(id="init", role="model", text=GREETING_TEXT)

class ChatOverlay:
    """Conversation state for one overlay instance; one request in flight at a time"""

    def __init__(self, proxy: GeminiChatProxy, store: LocalStore):
        self.proxy = proxy
        self.store = store
        self.mode = ChatMode.STANDARD
        self.is_open = False
        self.is_loading = False
        self._last_id_ms = 0
        self.messages: List[ChatMessage] = self._load()

    def _load(self) -> List[ChatMessage]:
        try:
            saved = self.store.get_item(TRANSCRIPT_KEY)
        except StorageError as e:
            logger.error(f"Could not read chat history: {e}")
            return [greeting()]

        if saved:
            try:
                messages = _transcript_adapter.validate_json(saved)
                if messages:
                    return messages
            except ValidationError as e:
                logger.warning(f"Failed to parse chat history, reseeding: {e}")
        return [greeting()]

    def _persist(self) -> None:
        payload = json.dumps([message.model_dump() for message in self.messages])
        try:
            self.store.set_item(TRANSCRIPT_KEY, payload)
        except StorageError as e:
            logger.error(f"Could not save chat history: {e}")

    def _append(self, message: ChatMessage) -> None:
        self.messages.append(message)
        self._persist()

    def _next_id(self) -> str:
        now_ms = int(datetime.now().timestamp() * 1000)
        self._last_id_ms = max(now_ms, self._last_id_ms + 1)
        return str(self._last_id_ms)

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def set_mode(self, mode: ChatMode) -> None:
        self.mode = ChatMode(mode)

    async def send(self, text: str) -> Optional[ChatMessage]:
        """Send a user turn and append the reply; ignored while blank or busy"""
        if not text.strip() or self.is_loading:
            return None

        history = list(self.messages)
        self._append(ChatMessage(id=self._next_id(), role="user", text=text))
        self.is_loading = True
        try:
            reply_text = await self.proxy.send_message(text, self.mode, history)
            reply = ChatMessage(id=self._next_id(), role="model", text=reply_text)
            self._append(reply)
            return reply
        finally:
            self.is_loading = False

    def clear(self) -> None:
        """Reset to the greeting and drop the persisted transcript"""
        self.messages = [greeting()]
        try:
            self.store.remove_item(TRANSCRIPT_KEY)
        except StorageError as e:
            logger.error(f"Could not clear chat history: {e}")
        logger.info("Chat history cleared")

    def to_dict(self) -> dict:
        return {
            "is_open": self.is_open,
            "is_loading": self.is_loading,
            "mode": self.mode.value,
            "mode_label": self.mode.label,
            "modes": [{"value": m.value, "label": m.label} for m in ChatMode],
            "messages": [message.model_dump() for message in self.messages]
        }
