from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import API_TITLE, CORS_ORIGINS, configure_logging
from api.routers import score

configure_logging()

app = FastAPI(
    title=API_TITLE,
    description="Deterministic FSSAI-aligned wellness scoring for packaged food labels",
    version="1.0.0"
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,  # Must be False when using wildcard origins
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(score.router)


@app.get("/")
async def root():
    return {"message": f"{API_TITLE} is running", "docs": "/docs"}


@app.get("/api/health")
async def health():
    return {"status": "healthy"}
