# querykit/main.py
"""
QueryKit: FastAPI app exposing the query string builder.
"""

from fastapi import FastAPI

from querykit.config import VERSION, settings
from querykit.query.routes import router as query_router

app = FastAPI(title=settings.app_title, version=VERSION)
app.include_router(query_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": VERSION}
