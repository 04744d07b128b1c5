import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

import requests

from app.core.config import settings
from app.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


@dataclass
class ChatCompletion:
    """The parts of an OpenAI-style completion response that get persisted"""

    id: str
    created: datetime
    content: str


class ChatCompletionClient:
    """Thin client for an OpenAI-compatible /chat/completions endpoint"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url or settings.LLM_BASE_URL
        self.api_key = api_key if api_key is not None else settings.LLM_API_KEY
        self.model = model or settings.LLM_MODEL
        self.timeout = timeout or settings.LLM_TIMEOUT_SECONDS

    def create(self, messages: List[Dict[str, str]]) -> ChatCompletion:
        """
        Request a completion for the given messages.

        Any transport error, non-2xx status or malformed body is raised as
        ProviderError. Nothing is retried.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        payload = {"model": self.model, "messages": messages}

        try:
            response = requests.post(
                self.base_url, headers=headers, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.error(f"Chat completion request failed: {e}")
            raise ProviderError("Internal Error") from e
        except ValueError as e:
            logger.error(f"Chat completion response is not JSON: {e}")
            raise ProviderError("Internal Error") from e

        return self._parse(body)

    @staticmethod
    def _parse(body: dict) -> ChatCompletion:
        try:
            contents = []
            for choice in body["choices"]:
                content = choice["message"]["content"]
                if not isinstance(content, str):
                    content = json.dumps(content, ensure_ascii=False)
                contents.append(content)

            return ChatCompletion(
                id=str(body["id"]),
                created=datetime.fromtimestamp(int(body["created"]), tz=timezone.utc),
                content="\n".join(contents),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Unexpected chat completion payload: {e}")
            raise ProviderError("Internal Error") from e
