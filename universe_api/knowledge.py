from __future__ import annotations
import json
import logging
from typing import List, Optional, Sequence

from universe.faq import FAQ, FLEET_KNOWLEDGE
from universe.search import search_faq, suggested_questions

from .adapters.llm import LLMError, OpenAIChat
from .models import ChatMessage, KnowledgeAnswer

logger = logging.getLogger(__name__)

NOT_FOUND = ("I couldn't find specific information matching your query in the local knowledge base. "
             "Try different keywords or contact support directly.")

SYSTEM_PROMPT = """You are a helpful fleet support assistant.
Use the following knowledge base to answer the user's question accurately.

KNOWLEDGE BASE:
{knowledge}

ADDITIONAL FAQ DATA:
{faq}

If the answer is not in the knowledge base, say "I couldn't find specific information about that in my documentation, but I can help you contact support."
Keep answers concise, friendly, and formatted with markdown."""


class KnowledgeAssistant:
    """ask(query, history) -> answer, sources, suggested questions.

    Uses the language model when one is configured; otherwise, or when the
    provider fails, answers from the local FAQ table.
    """

    def __init__(self, llm: Optional[OpenAIChat] = None):
        self.llm = llm

    def ask(self, query: str, history: Sequence[ChatMessage] = ()) -> KnowledgeAnswer:
        suggestions = suggested_questions(query)
        if self.llm is not None:
            try:
                answer = self.llm.complete(self._messages(query, history), temperature=0.3, max_tokens=500)
                return KnowledgeAnswer(answer=answer, sources=["Knowledge Base", "Official Documentation"],
                                       suggested_questions=suggestions)
            except LLMError:
                logger.warning("Knowledge provider failed; answering from the local FAQ")
        return self.local_answer(query, suggestions)

    def local_answer(self, query: str, suggestions: Optional[List[str]] = None) -> KnowledgeAnswer:
        hits = search_faq(query)
        if suggestions is None:
            suggestions = suggested_questions(query)
        if hits.empty:
            return KnowledgeAnswer(answer=NOT_FOUND, sources=[], suggested_questions=suggestions)
        best = hits.iloc[0]
        return KnowledgeAnswer(answer=best["answer"], sources=[f"FAQ: {best['category']}"],
                               suggested_questions=suggestions)

    def _messages(self, query: str, history: Sequence[ChatMessage]) -> List[dict]:
        system = SYSTEM_PROMPT.format(knowledge=FLEET_KNOWLEDGE, faq=json.dumps(FAQ))
        turns = [{"role": m.role, "content": m.content} for m in history if m.role != "system"]
        return [{"role": "system", "content": system}, *turns, {"role": "user", "content": query}]
