"""
AuraShield — Scam Message Risk Scoring
======================================

Modules:
    - main.py     : FastAPI application entry point (GET /health, POST /analyze)
    - analyzer.py : Pipeline coordinator, never raises (safe default on faults)
    - detector.py : Intent, psychological, context and scam-type stages
    - risk.py     : Risk aggregation, reasoning lines and recommendation
    - lexicons.py : Fixed ordered trigger lexicons and labels
    - models.py   : Pydantic request/response schemas
    - auth.py     : Bearer / x-api-key authentication dependency
    - config.py   : Environment configuration (.env aware)
"""

from aurashield.analyzer import analyze, safe_default

__all__ = ["analyze", "safe_default"]
