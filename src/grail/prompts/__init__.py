"""Prompt assembly for terminal agents."""

from .agent_prompt import build_agent_prompt

__all__ = [
    "build_agent_prompt",
]
