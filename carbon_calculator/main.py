import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes.footprint import router as footprint_router
from .settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Personal Carbon Footprint Calculator",
    version="1.0.0",
    description="Estimates annual CO₂e from transport, home energy and lifestyle answers.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "carbon-calculator"}


app.include_router(footprint_router)
