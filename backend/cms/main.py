import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms.database import init_db
from cms.routes import node_types, nodes

logger = logging.getLogger(__name__)

app = FastAPI(title="CMS Nodes API")

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(node_types.router, prefix="/api", tags=["node-types"])
app.include_router(nodes.router, prefix="/api", tags=["nodes"])


@app.on_event("startup")
def on_startup():
    init_db()  # creates tables, the anonymous account and default text formats
    logger.info("Registered %d routes", len(app.routes))


@app.get("/api/health")
def health_check():
    return {"app_name": "CMS Nodes API", "status": "healthy"}
