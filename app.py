# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --port 4000 --reload
"""

from greeter.main import app  # re-export FastAPI instance
