"""Render an aggregate manifest as the agent's toolbelt prompt."""

from __future__ import annotations

from typing import Any

from grail.manifest.model import Manifest

INTRO = "You are an AI working in a terminal with access to the Grail toolbelt."

WHEN_TO_USE = [
    "When to use Grail:",
    "- Use web/search/docs commands to find and bundle official docs.",
    "- Use sessions/watchers to run dev servers and tests in long-lived terminals.",
    "- Use issue-tracker commands (e.g., linear/jira) to fetch issues and context.",
]

CLOSING = "Always prefer Grail for web docs retrieval, bundling, and long-running tasks."


def _command_line(command: dict[str, Any]) -> str | None:
    name = command.get("name")
    if not isinstance(name, str) or not name:
        return None
    desc = command.get("desc")
    if isinstance(desc, str) and desc:
        return f"- {name}: {desc}"
    return f"- {name}"


def build_agent_prompt(manifest: Manifest) -> str:
    """Build the prompt text. Each section is followed by a blank line.

    Commands, Examples and Environment hints only appear when non-empty;
    env hints keep the manifest's insertion order.
    """
    lines: list[str] = [INTRO]
    if manifest.description:
        lines += [f"Grail: {manifest.description}", ""]

    lines += WHEN_TO_USE + [""]

    if manifest.commands:
        lines.append("Commands:")
        for command in manifest.commands:
            line = _command_line(command)
            if line is not None:
                lines.append(line)
        lines.append("")

    if manifest.examples:
        lines.append("Examples:")
        lines.extend(f"- {ex}" for ex in manifest.examples)
        lines.append("")

    if manifest.env:
        lines.append("Environment hints:")
        lines.extend(f"- {key}: {value}" for key, value in manifest.env.items())
        lines.append("")

    lines.append(CLOSING)
    return "\n".join(lines) + "\n"
