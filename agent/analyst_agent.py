# =============================================================================
# agent/analyst_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that answers analytics questions by calling the
#   MCP tools in tools/mcp_server.py.
#
#   ┌───────────────────────┐  stdio  ┌─────────────────────┐  HTTPS  ┌──────────────┐
#   │  ADK Agent (LiteLlm)  │────────▶│  FastMCP server     │────────▶│ Analytics API│
#   └───────────────────────┘         │  (tools/mcp_server) │         └──────────────┘
#                                     └─────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess ("uv run python -m tools.mcp_server")
#   and talks to it over stdin/stdout.  The MCP stdio client does NOT pass
#   the parent's environment through, so the Robinhood variables are
#   forwarded explicitly by server_environment().
#
# MODEL:
#   ROBINHOOD_AGENT_MODEL picks the LiteLlm model string
#   (default "openrouter/openai/gpt-4o").  LiteLlm reads the provider key
#   (e.g. OPENROUTER_API_KEY) from the environment itself.
# =============================================================================

import os
from typing import Mapping, Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_analyst_prompt
from core.config import API_KEY_ENV, API_URL_ENV

MODEL_ENV = "ROBINHOOD_AGENT_MODEL"
DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_environment(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Environment handed to the MCP server subprocess."""
    env = os.environ if environ is None else environ
    forwarded = {}
    for key in (API_KEY_ENV, API_URL_ENV, "PATH", "HOME"):
        if env.get(key):
            forwarded[key] = env[key]
    return forwarded


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the analytics agent wired to the MCP tool server."""
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=server_environment(),
        ),
    )

    return Agent(
        name="robinhood_analyst",
        model=LiteLlm(model=model or os.environ.get(MODEL_ENV, DEFAULT_MODEL)),
        instruction=get_analyst_prompt(),
        tools=[mcp_tools],
    )
