# =============================================================================
# main.py  —  Interactive console for the Robinhood Analytics analyst agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (ROBINHOOD_API_KEY, OPENROUTER_API_KEY, ...)
#   2. Creates the ADK agent (agent/analyst_agent.py), which spawns the MCP
#      tool server as a subprocess
#   3. Reads questions from the console and streams the agent's events,
#      printing every tool call and the final answer
#
# Type 'quit', 'exit' or 'q' to leave.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm and the MCP subprocess both read the environment when the agent is
# created, so .env must be loaded before the agent import below.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.analyst_agent import create_agent

APP_NAME = "robinhood_analytics"
USER_ID = "console_user"
EXIT_COMMANDS = ("quit", "exit", "q")


async def run_agent():
    """Run the analyst agent in a read-eval-print loop."""
    print("=" * 70)
    print("  ROBINHOOD ANALYTICS ANALYST")
    print("  Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent ready. Ask about market share, rankings, pricing...")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in EXIT_COMMANDS:
            print("\n👋 Goodbye!")
            break
        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")
        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
