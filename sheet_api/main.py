import logging

from fastapi import FastAPI

from sheet_api.api.sheets import router as sheets_router
from sheet_api.config import LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(
    title="Sheet API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(sheets_router)
