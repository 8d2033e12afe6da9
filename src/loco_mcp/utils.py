"""Server assembly helpers for the Loco MCP server."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from typing import Any, Callable, Literal, Optional

from fastmcp import FastMCP

from .clients.loco import LocoClient
from .config import LocoSettings
from .runtime import set_active_service
from .services.loco_service import LocoService

logger = logging.getLogger(__name__)

Transport = Literal["stdio", "http", "sse", "streamable-http"]
VALID_TRANSPORTS = ("stdio", "http", "sse", "streamable-http")


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr; stdout carries JSON-RPC in stdio mode."""
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def create_mcp_server() -> FastMCP:
    """Create the FastMCP server instance."""
    return FastMCP("mcp-server/loco-app")


def get_tool_modules() -> list[Any]:
    """Get list of tool modules to register."""
    from importlib import import_module

    from loco_mcp.tools import _MODULE_PATHS

    return [import_module(module_path) for module_path in _MODULE_PATHS.values()]


def register_tools(mcp: FastMCP, tool_modules: list[Any] | None = None, verbose: bool = True) -> int:
    """Register all public functions from tool modules as MCP tools.

    Args:
        mcp: The FastMCP server instance
        tool_modules: List of modules to register tools from (defaults to all)
        verbose: Whether to print registration messages

    Returns:
        Number of tools registered
    """
    if tool_modules is None:
        tool_modules = get_tool_modules()

    tools_registered = 0

    for module in tool_modules:

        def make_predicate(mod: Any) -> Callable[[Any], bool]:
            return lambda obj: (
                inspect.isfunction(obj)
                and not obj.__name__.startswith("_")
                and obj.__module__ == mod.__name__  # Only functions defined in this module
            )

        for name, func in inspect.getmembers(module, predicate=make_predicate(module)):
            mcp.tool(func)
            tools_registered += 1
            if verbose:
                print(f"Registered tool: {module.__name__}.{name}", file=sys.stderr)

    return tools_registered


def create_configured_server(settings: LocoSettings, verbose: bool = False) -> FastMCP:
    """Create an MCP server with the Loco service configured and all tools registered."""
    set_active_service(LocoService(LocoClient(settings)))
    logger.info("Loco settings: %s", settings.to_dict())

    mcp = create_mcp_server()
    tools_count = register_tools(mcp, verbose=verbose)

    if verbose:
        print(f"Successfully registered {tools_count} tools", file=sys.stderr)

    return mcp


def get_transport() -> Transport:
    """Get transport mode from environment, defaulting to stdio."""
    transport = os.environ.get("FASTMCP_TRANSPORT", "stdio")
    if transport in VALID_TRANSPORTS:
        return transport  # type: ignore[return-value]
    logger.warning("Invalid transport '%s', using 'stdio'", transport)
    return "stdio"


def run_server(settings: LocoSettings, skip_banner: bool = False) -> None:
    """Run the MCP server with the selected transport.

    Args:
        settings: Resolved Loco credential and endpoint
        skip_banner: If True, skip the FastMCP startup banner display.
    """
    try:
        mcp = create_configured_server(settings)
        transport = get_transport()

        if transport == "stdio":
            logger.info("Loco MCP Server running on stdio")
            mcp.run(transport=transport, show_banner=not skip_banner)
            return

        host = os.environ.get("FASTMCP_HOST") or "127.0.0.1"
        port = int(os.environ.get("FASTMCP_PORT", "8000"))
        logger.info("Loco MCP Server running on %s://%s:%s", transport, host, port)
        mcp.run(transport=transport, show_banner=not skip_banner, host=host, port=port)

    except (ImportError, ModuleNotFoundError) as e:
        print(f"Error starting MCP server - Missing dependency: {e}", file=sys.stderr)
        print("Please install loco-mcp with: pip install loco-mcp", file=sys.stderr)
        raise

    except Exception as e:
        error_msg = str(e)
        print(f"Error starting MCP server: {error_msg}", file=sys.stderr)
        if "address already in use" in error_msg.lower():
            print("The server port is already in use. Change it with FASTMCP_PORT.", file=sys.stderr)
        raise
