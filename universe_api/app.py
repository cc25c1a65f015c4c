from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import json
import logging

from universe.ai import draft_insight
from universe.curation import compose_curation_response
from universe.data import CsvRecordRepository, RecordRepository
from universe.live import generate_api_metrics, generate_live_data_point, generate_live_metrics, generate_training_update
from universe.mock_data import default_repository
from universe.models import CurationSnapshot

from .models import InsightRequest, InsightResponse, KnowledgeRequest, KnowledgeAnswer, CuratedSummary
from .adapters.config import Settings, settings
from .adapters.llm import LLMError, make_llm
from .knowledge import KnowledgeAssistant

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Fleet Universe Curation API")
app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

INSIGHT_SYSTEM = ("You are the fleet universe orchestrator. Blend hospitality context, KPI storytelling, and precise "
                  "action items. Always cite at least one metric or training milestone.")
PROVIDER_FAILED = "The language model call failed. Please ensure OPENAI_API_KEY is configured and the provider is reachable."

def get_repository()->RecordRepository:
    csv_path = Settings().UNIVERSE_RECORDS_CSV
    if csv_path: return CsvRecordRepository(csv_path)
    return default_repository()

def dump(model): return model.model_dump(by_alias=True, mode="json")

# Convenience
def llm(): return make_llm(Settings())

@app.get("/health")
def health(): return {"status":"ok"}

@app.get("/api/curation", response_model=CurationSnapshot)
def curation(repo:RecordRepository=Depends(get_repository)): return compose_curation_response(repo)

LIVE_TYPES = {
    "operations": generate_live_data_point,
    "metrics": generate_live_metrics,
    "training": generate_training_update,
    "api": generate_api_metrics,
}

@app.get("/api/live")
def live(type:str="all", repo:RecordRepository=Depends(get_repository)):
    if type in LIVE_TYPES: return {"type": type, "data": dump(LIVE_TYPES[type]())}
    if type != "all": logger.debug("Unknown live type %r; serving the full live snapshot", type)
    universe = compose_curation_response(repo)
    curated = CuratedSummary(
        kpi_count=len(universe.kpis),
        latest_kpi=universe.kpis[0] if universe.kpis else None,
        alert_count=len(universe.alerts),
        critical_alerts=sum(1 for a in universe.alerts if a.severity in ("critical", "high")),
    )
    return {
        "type": "all",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "operations": dump(generate_live_data_point()),
        "metrics": dump(generate_live_metrics()),
        "training": dump(generate_training_update()),
        "api": dump(generate_api_metrics()),
        "curated": dump(curated),
    }

@app.post("/api/live")
def live_snapshot(): return {"type": "snapshot", "data": dump(generate_live_metrics())}

@app.post("/api/insights", response_model=InsightResponse)
def insights(req:InsightRequest, repo:RecordRepository=Depends(get_repository)):
    snapshot = compose_curation_response(repo)
    client = llm()
    if client is None: return InsightResponse(content=draft_insight(snapshot, req.prompt))
    messages = [
        {"role": "system", "content": INSIGHT_SYSTEM},
        {"role": "user", "content": f"Prompt: {req.prompt}\n\nData Snapshot:\n{json.dumps(dump(snapshot), indent=2)}"},
    ]
    try:
        return InsightResponse(content=client.complete(messages))
    except LLMError:
        return JSONResponse(status_code=500, content={"content": PROVIDER_FAILED})

@app.post("/api/knowledge", response_model=KnowledgeAnswer)
def knowledge(req:KnowledgeRequest):
    if not req.query.strip(): raise HTTPException(400, "Query is required")
    return KnowledgeAssistant(llm()).ask(req.query, req.messages)
