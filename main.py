# =============================================================================
# main.py  —  Entry Point for the NocoDB MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the installed `nocodb-mcp` script)
#
# WHAT HAPPENS:
#   1. .env is loaded into the environment (NOCODB_TOKEN, etc.)
#   2. Settings are read ONCE from the environment (core/config.py)
#   3. The FastMCP server is built with those settings (tools/mcp_server.py)
#   4. The server speaks MCP over stdin/stdout until the host disconnects
#
# Point your MCP host at this command, e.g. in a host config:
#   {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
# =============================================================================

from dotenv import load_dotenv

from core.config import load_settings
from tools.mcp_server import create_server


def main() -> None:
    # Must run before load_settings(); settings never re-read the environment.
    load_dotenv()

    settings = load_settings()
    server = create_server(settings)
    server.run()


if __name__ == "__main__":
    main()
