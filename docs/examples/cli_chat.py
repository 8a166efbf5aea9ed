import asyncio
import os
from typing import Annotated, List

from dotenv import load_dotenv
from openai import AsyncOpenAI
from pydantic import Field

from tool_orchestrator import OpenAIEndpoint, OrchestratorSettings, TextGenerationContext, ToolOrchestrator, ToolRegistry
from tool_orchestrator.core import BaseMessage, Conversation, ToolResultUpdate, UserMessage, setup_logging

# Load environment variables
load_dotenv()

registry = ToolRegistry()


@registry.tool
def word_count(text: Annotated[str, Field(description="The text to count words in")]) -> dict:
    """Count the words of a text."""
    return {"words": len(text.split())}


async def main() -> None:
    """
    Run tool-calling turns against OpenAI from the command line.
    """
    settings = OrchestratorSettings.from_env()
    setup_logging(settings.log_level)

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        print("Error: OPENAI_API_KEY not found in environment variables.")
        return

    endpoint = OpenAIEndpoint(client=AsyncOpenAI(api_key=api_key), model_name="gpt-4o-mini")
    orchestrator = ToolOrchestrator(settings=settings)
    conversation = Conversation(id="cli", model=endpoint.model)
    history: List[BaseMessage] = []

    print("\nStart chatting! Type 'exit' or 'quit' to stop.")
    while True:
        user_input = input("\nYou: ").strip()
        if user_input.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break

        if not user_input:
            continue

        history.append(UserMessage(content=user_input))
        ctx = TextGenerationContext(endpoint=endpoint, conversation=conversation, messages=history)
        stream = orchestrator.run_tools(ctx, registry.select_tools(None, is_assistant=False))
        async for update in stream:
            if isinstance(update, ToolResultUpdate):
                print(f"[{update.result.call.name}] {update.result.outputs}")
            else:
                print(f"[{update.type}] {getattr(update, 'message', None) or ''}")

        if not stream.value:
            print("No tools were used.")


if __name__ == "__main__":
    asyncio.run(main())
