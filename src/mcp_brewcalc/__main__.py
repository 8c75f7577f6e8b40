"""
MCP server entry point for the brewing calculator.

Run with: python -m mcp_brewcalc
"""

import logging
import sys

logger = logging.getLogger("mcp_brewcalc")


def main() -> None:
    """Configure logging and run the server."""
    try:
        from mcp_brewcalc.config import get_config

        config = get_config()
        # stdout carries the MCP transport
        logging.basicConfig(
            stream=sys.stderr,
            level=config.log_level_number,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )

        from mcp_brewcalc.server import mcp

        logger.info("Starting MCP server (precision=%d)", config.precision)
        mcp.run(show_banner=False)
        logger.info("Server exited normally")
    except Exception:
        logging.basicConfig(stream=sys.stderr)
        logger.exception("Fatal error starting brewing calculator MCP")
        sys.exit(1)


if __name__ == "__main__":
    main()
