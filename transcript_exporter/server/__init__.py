"""HTTP API for transcript exports (FastAPI + uvicorn)."""
