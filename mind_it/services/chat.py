import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from google import genai
from google.genai import types

from mind_it.config.settings import settings
from mind_it.models.chat import ChatMessage, ChatMode
from mind_it.services.errors import ChatError, ConfigError

logger = logging.getLogger(__name__)

FALLBACK_TEXT = (
    "Sorry, I encountered an error while processing your request. "
    "Please check your connection or try again."
)
EMPTY_RESPONSE_TEXT = "I'm having trouble thinking clearly right now."

@dataclass(frozen=True)
class ModeConfig:
    model_name: str
    system_instruction: Optional[str] = None
    max_output_tokens: Optional[int] = None
    thinking_budget: Optional[int] = None

def mode_configs() -> Dict[ChatMode, ModeConfig]:
    """Per-mode model selection and generation settings"""
    return {
        ChatMode.STANDARD: ModeConfig(
            model_name=settings.GEMINI_MODEL_NAME,
            system_instruction="You are a helpful, empathetic mental wellness coach named 'Mind It Bot'."
        ),
        ChatMode.FAST: ModeConfig(
            model_name=settings.GEMINI_FAST_MODEL_NAME,
            system_instruction="You are a concise, helpful assistant. Keep answers short and quick.",
            max_output_tokens=1024
        ),
        # No output cap so the reasoning budget has room
        ChatMode.THINKING: ModeConfig(
            model_name=settings.GEMINI_THINKING_MODEL_NAME,
            thinking_budget=settings.GEMINI_THINKING_BUDGET
        ),
    }

class GeminiChatProxy:
    """Relays chat turns to Gemini and always answers with displayable text"""

    def __init__(self, api_key: Optional[str] = settings.GEMINI_API_KEY):
        self.api_key = api_key
        self.configs = mode_configs()
        self.client: Optional[genai.Client] = None
        if api_key:
            self.client = genai.Client(api_key=api_key)
        else:
            logger.warning("GEMINI_API_KEY is not set; chat replies will use the fallback text")

    def _build_config(self, mode: ChatMode) -> types.GenerateContentConfig:
        config = self.configs[ChatMode(mode)]
        thinking_config = None
        if config.thinking_budget is not None:
            thinking_config = types.ThinkingConfig(thinking_budget=config.thinking_budget)
        return types.GenerateContentConfig(
            system_instruction=config.system_instruction,
            max_output_tokens=config.max_output_tokens,
            candidate_count=1,
            thinking_config=thinking_config
        )

    async def send_message(
        self,
        prompt: str,
        mode: ChatMode = ChatMode.STANDARD,
        history: Sequence[ChatMessage] = ()
    ) -> str:
        """Send the prompt with prior turns; failures come back as FALLBACK_TEXT"""
        try:
            if self.client is None:
                raise ConfigError("GEMINI_API_KEY is not configured")

            contents = [message.to_content() for message in history]
            contents.append({"role": "user", "parts": [{"text": prompt}]})

            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.configs[ChatMode(mode)].model_name,
                contents=contents,
                config=self._build_config(mode)
            )
            if response is None:
                raise ChatError("Empty response from Gemini")
            return response.text or EMPTY_RESPONSE_TEXT

        except Exception as e:
            logger.error(f"Gemini API error: {e}", exc_info=True)
            return FALLBACK_TEXT
