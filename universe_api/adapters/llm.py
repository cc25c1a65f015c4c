import logging
import requests
from .base import BaseAdapter

logger = logging.getLogger(__name__)

class LLMError(RuntimeError):
    pass

class OpenAIChat(BaseAdapter):
    def __init__(self, model:str='gpt-4.1-mini', **cfg):
        super().__init__(**cfg); self.model=model
    def complete(self, messages:list[dict], temperature:float=0.3, max_tokens:int=700)->str:
        try:
            r = requests.post(f"{self.url}/chat/completions",
                              headers={"Authorization": f"Bearer {self.api_key}"},
                              json={"model": self.model, "messages": messages, "temperature": temperature, "max_tokens": max_tokens},
                              timeout=self.timeout)
            r.raise_for_status()
            text = (r.json()["choices"][0]["message"]["content"] or "").strip()
        except (requests.RequestException, KeyError, IndexError, ValueError) as e:
            logger.error("LLM call to %s failed: %s", self.model, e)
            raise LLMError(str(e)) from e
        return text or "No response."

def make_llm(settings)->OpenAIChat|None:
    if not settings.OPENAI_API_KEY: return None
    return OpenAIChat(model=settings.OPENAI_MODEL, url=settings.OPENAI_BASE_URL, api_key=settings.OPENAI_API_KEY, timeout=settings.LLM_TIMEOUT_SEC)
