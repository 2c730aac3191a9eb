"""
AutoRAG MCP Tools Registry.

This module provides centralized tool registration for the MCP server.
"""
from ..config import Settings
from . import search
from .base import ToolRegistry
from .search.client import AutoRAGClient, RetrievalBackend


def build_registry(settings: Settings, backend: RetrievalBackend | None = None) -> ToolRegistry:
    """Build a fresh registry holding all tools.

    Args:
        settings: Server settings, used to build the AutoRAG client
        backend: Backend to bind the tools to instead of the AutoRAG client
    """
    registry = ToolRegistry()
    search.register(registry, backend or AutoRAGClient(settings))
    return registry
