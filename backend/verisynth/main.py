import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from verisynth.api.routes import router as api_router
from verisynth.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="VeriSynth",
    description="Claim extraction and web-grounded verification for AI-generated text",
    version="0.1.0",
)

# CORS for the UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.frontend_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
