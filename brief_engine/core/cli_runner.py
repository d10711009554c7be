"""
CLI Runner for the Brief Orchestrator
Command-line tool to watch a brief fill in over a conversation.
"""
import asyncio
import sys
from typing import Iterable, TextIO
from loguru import logger
from brief_engine.core.brief_orchestrator import BriefOrchestrator, TurnResult
from brief_engine.models.brief import LiveBrief
from brief_engine.utils.observability import configure_logging

DEMO_MESSAGES = [
    "I need a 30 day content calendar",
    "Instagram",
    "mostly to drive more signups for our fitness app",
    "instead of that, make it more playful",
]

DEMO_AUDIENCES = [
    {
        "name": "Busy Professionals",
        "isPrimary": True,
        "demographics": {"ageRange": {"min": 28, "max": 45}, "income": "high"},
        "firmographics": {"jobTitles": ["manager", "consultant"]},
        "psychographics": {"values": ["efficiency"], "painPoints": ["no time for the gym"]},
    },
]

BRIEF_FIELDS = (
    "task_summary",
    "task_type",
    "intent",
    "platform",
    "content_type",
    "quantity",
    "duration",
    "topic",
    "audience",
)


def format_brief(brief: LiveBrief) -> str:
    """Multi-line view of a brief's slots."""
    lines = [f"Brief {brief.id} | {brief.completion_percentage}% complete"]
    for name in BRIEF_FIELDS:
        field = getattr(brief, name)
        value = field.value.name if name == "audience" and field.value else field.value
        lines.append(f"   {name:<13} {str(value):<40} {field.confidence:.2f} {field.source}")
    if brief.dimensions:
        dims = ", ".join(f"{d.label} {d.width}x{d.height}" for d in brief.dimensions)
        lines.append(f"   dimensions    {dims}")
    lines.append(f"   ready for designer: {brief.is_ready_for_designer}")
    return "\n".join(lines)


def print_turn(result: TurnResult, out: TextIO = sys.stdout) -> None:
    print(f"\n📝 Summary: {result.summary}", file=out)
    if result.degraded:
        print("⚠️  Turn degraded, brief unchanged", file=out)
    if result.clarifying_question:
        q = result.clarifying_question
        options = " / ".join(o.label for o in q.options)
        print(f"❓ {q.prompt} [{options}]", file=out)
    print(format_brief(result.brief), file=out)
    print(f"⚡ Duration: {result.duration_ms:.1f}ms", file=out)


async def run_conversation(
    messages: Iterable[str] = DEMO_MESSAGES,
    draft_id: str = "cli-demo",
    out: TextIO = sys.stdout,
) -> LiveBrief:
    """
    Run a scripted conversation and print the brief after every turn.

    Returns:
        The final stored brief, or an empty one if no turn saved anything
    """
    orchestrator = BriefOrchestrator()

    print("\n" + "=" * 70, file=out)
    print("💬 Starting Brief Simulation", file=out)
    print("=" * 70, file=out)

    for i, message in enumerate(messages, 1):
        print(f"\n{'─' * 70}", file=out)
        print(f"🗣️  USER ({i}): {message}", file=out)
        print(f"{'─' * 70}", file=out)

        result = await orchestrator.process_message(draft_id, message, brand_audiences=DEMO_AUDIENCES)
        print_turn(result, out)

    print(f"\n✅ Brief Demo Complete!\n", file=out)
    return await orchestrator.store.get(draft_id) or LiveBrief.create_empty(draft_id)


async def run_interactive(draft_id: str = "cli-interactive"):
    """Read messages from stdin until EOF or an empty line."""
    orchestrator = BriefOrchestrator()
    logger.info("Type a message and press enter. Empty line to quit.")

    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        message = line.strip()
        if not message:
            break
        result = await orchestrator.process_message(draft_id, message, brand_audiences=DEMO_AUDIENCES)
        print_turn(result)


if __name__ == "__main__":
    configure_logging()

    # Choose demo mode
    if len(sys.argv) > 1 and sys.argv[1] == "interactive":
        asyncio.run(run_interactive())
    else:
        asyncio.run(run_conversation())
