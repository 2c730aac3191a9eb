"""
AutoRAG MCP - Main FastAPI application.
"""
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .mcp.server import get_settings, router as mcp_router
from .tools import build_registry

load_dotenv()

logger = logging.getLogger("autorag_mcp")

# Create FastAPI app
app = FastAPI(
    title="AutoRAG MCP",
    description="MCP server exposing Cloudflare AutoRAG search tools",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include MCP router
app.include_router(mcp_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": get_settings().server_name,
        "version": __version__,
        "status": "operational"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """
    Run on startup.
    Configure logging and report the tools every request will see.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("AutoRAG MCP starting (AutoRAG instance: %s)", settings.rag_name or "<not configured>")

    registry = build_registry(settings)
    logger.info("Loaded %d tools", len(registry))
    for tool_schema in registry.list_tools():
        logger.info("   - %s", tool_schema.name)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
