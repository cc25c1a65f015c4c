# universe/search.py
from __future__ import annotations
import re
from typing import List, Optional

import pandas as pd

from .faq import FAQ

MAX_SUGGESTIONS = 3


def faq_frame() -> pd.DataFrame:
    return pd.DataFrame(FAQ)


def _terms(q: str) -> List[str]:
    return [t for t in re.findall(r"[a-z0-9\-]+", q.lower()) if len(t) > 2]


def search_faq(q: str, df: Optional[pd.DataFrame] = None) -> pd.DataFrame:
    """FAQ rows matching the query, best first.

    A keyword hit scores 3, the query inside the question 2, inside the answer
    1. Equal scores keep table order.
    """
    df = faq_frame() if df is None else df
    ql = (q or "").strip().lower()
    if not ql:
        return df.iloc[0:0]
    terms = set(_terms(ql)) | {ql}
    kw_hits = df["keywords"].map(lambda kws: sum(1 for k in kws if k in terms or k in ql))
    score = (kw_hits * 3
             + df["question"].str.lower().str.contains(ql, regex=False) * 2
             + df["answer"].str.lower().str.contains(ql, regex=False) * 1)
    ranked = df.assign(score=score)
    ranked = ranked[ranked["score"] > 0]
    return ranked.sort_values("score", ascending=False, kind="mergesort")


def suggested_questions(q: str, df: Optional[pd.DataFrame] = None) -> List[str]:
    """Up to three follow-ups: other matches first, then the best match's category."""
    df = faq_frame() if df is None else df
    hits = search_faq(q, df)
    if hits.empty:
        return df["question"].head(MAX_SUGGESTIONS).tolist()
    best = hits.iloc[0]
    related = hits["question"].iloc[1:].tolist()
    related += df[(df["category"] == best["category"]) & (df["question"] != best["question"])]["question"].tolist()
    out: List[str] = []
    for question in related:
        if question not in out:
            out.append(question)
    return out[:MAX_SUGGESTIONS]
