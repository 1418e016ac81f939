#!/usr/bin/env python3
"""Basic usage example for SpeakerScript MCP server."""

import asyncio
import os

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

SAMPLE = """Interview - Take 3

[00:00:01:00 - 00:00:04:12]
ALICE
Thanks for coming in today.

[00:00:04:13 - 00:00:09:00]
BOB
Happy to be here.

[00:00:09:01 - 00:00:12:00]
ALICE
Let's begin.
"""


async def run_example():
    """Load a transcript, filter out one speaker and export the result."""

    test_file = "test_transcript.txt"
    with open(test_file, "w", encoding="utf-8") as f:
        f.write(SAMPLE)

    exported = None
    try:
        server_params = StdioServerParameters(command="python", args=["-m", "speakerscript"])

        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()

                tools = await session.list_tools()
                print("Available tools:")
                for tool in tools.tools:
                    print(f"  - {tool.name}: {tool.description}")

                print("\n--- Loading transcript ---")
                summary = await session.call_tool("load_transcript", {"file_path": test_file})
                data = summary.structuredContent or {}
                print(f"  Segments: {data.get('segment_count')}")
                for speaker in data.get("speakers", []):
                    print(f"  {speaker['name']}: {speaker['segment_count']} segments")

                print("\n--- Hiding BOB ---")
                filtered = await session.call_tool("toggle_speaker", {"speaker": "BOB"})
                data = filtered.structuredContent or {}
                print(f"  Words: {data['stats']['word_count']}, range: {data['stats']['time_range']}")
                print(data["filtered_text"])

                print("\n--- Exporting ---")
                result = await session.call_tool("export_transcript", {"directory": "."})
                data = result.structuredContent or {}
                exported = data.get("path")
                print(f"  Wrote {data.get('filename')}")

    except Exception as e:
        print(f"Error: {e}")
    finally:
        for path in (test_file, exported):
            if path and os.path.exists(path):
                os.remove(path)


if __name__ == "__main__":
    asyncio.run(run_example())
