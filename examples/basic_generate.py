"""Basic example calling the v0 tools directly, without an MCP host."""

import asyncio

from v0_mcp import V0Service, V0Tools, load_config


async def generate_example():
    """Generate a component with the synchronous path."""
    print("=== Generate UI ===")

    async with V0Service(load_config()) as service:
        tools = V0Tools(service)
        result = await tools.call_tool(
            "v0_generate_ui",
            {"prompt": "A pricing table with three tiers and a highlighted middle column"},
        )

        if result.is_error:
            print(f"❌ {result.text}")
        else:
            print(result.text)


async def streaming_chat_example():
    """Refine a component over a short conversation, streaming the reply."""
    print("\n=== Streaming chat ===")

    async with V0Service(load_config()) as service:
        result = await service.chat_complete(
            [
                {"role": "user", "content": "Create a primary button"},
                {"role": "assistant", "content": "Here is a primary button component."},
                {"role": "user", "content": "Make it rounded and add a loading state"},
            ],
            stream=True,
        )

        if result.success:
            print(result.content)
            print(f"📊 Usage: {result.usage or 'not reported for streams'}")
        else:
            print(f"❌ {result.error} ({result.metadata['errorType']})")


async def main():
    await generate_example()
    await streaming_chat_example()


if __name__ == "__main__":
    asyncio.run(main())
