from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from universe.models import CamelModel, KPICard
class InsightRequest(BaseModel):
    prompt: str = ""
class InsightResponse(BaseModel):
    content: str
class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str
class KnowledgeRequest(BaseModel):
    query: str = ""
    messages: List[ChatMessage] = Field(default_factory=list)
class KnowledgeAnswer(CamelModel):
    answer: str
    suggested_questions: List[str] = Field(default_factory=list, max_length=3)
    sources: List[str] = Field(default_factory=list)
class CuratedSummary(CamelModel):
    kpi_count: int
    latest_kpi: Optional[KPICard] = Field(default=None, alias="latestKPI")
    alert_count: int
    critical_alerts: int
