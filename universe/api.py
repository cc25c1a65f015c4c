
import os, requests
API_URL = os.environ.get("UNIVERSE_API_URL", "http://localhost:8000")
def api_up()->bool:
    try:
        r = requests.get(f"{API_URL}/health", timeout=1.2); return r.ok
    except requests.RequestException: return False
def get_curation()->dict|None:
    try:
        r = requests.get(f"{API_URL}/api/curation", timeout=5)
        if r.ok: return r.json()
    except requests.RequestException: return None
    return None
def get_live(kind:str="all")->dict|None:
    try:
        r = requests.get(f"{API_URL}/api/live", params={"type": kind}, timeout=5)
        if r.ok: return r.json()
    except requests.RequestException: return None
    return None
def ask_insight(prompt:str)->str:
    try:
        r = requests.post(f"{API_URL}/api/insights", json={"prompt": prompt}, timeout=30)
        return r.json().get("content", "") if r.headers.get("content-type","").startswith("application/json") else f"Error: {r.text}"
    except requests.RequestException as e: return f"API not reachable: {e}"
