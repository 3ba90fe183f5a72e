import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.routes import glossary as glossary_route
from backend.app.core.config import get_settings
from backend.app.logging_utils import configure_logging

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Glossary Editor",
    description="Glossary entry editing helpers — wire/editable conversion, edit status and sort params",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(glossary_route.router)


@app.get("/")
async def root():
    return {
        "message": "Glossary Editor API",
        "version": "1.0.0",
        "endpoints": {
            "editable": "/api/glossary/entries/editable",
            "wire": "/api/glossary/entries/wire",
            "save_payload": "/api/glossary/entries/save-payload",
            "status": "/api/glossary/entries/status",
            "sort": "/api/glossary/sort",
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=3301)
