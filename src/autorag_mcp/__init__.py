"""AutoRAG MCP - JSON-RPC tool server for Cloudflare AutoRAG search."""

__version__ = "1.2.0"
