"""Main entry point for SpeakerScript MCP server."""

import logging

from .server import mcp, settings


def main() -> None:
    """Entry point for the SpeakerScript MCP server."""
    # stdout carries the MCP stdio transport, basicConfig logs to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
