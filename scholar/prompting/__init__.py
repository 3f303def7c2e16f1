"""
Prompt Builder layer for the AI gateway.

Exports one builder per generation task and the build_prompt() dispatcher.
"""

from .prompt_builder import (
    JSON_INSTRUCTION,
    build_prompt,
    build_resume_prompt,
    build_profile_optimization_prompt,
    build_networking_prompt,
    build_connection_message_prompt,
)

__all__ = [
    "JSON_INSTRUCTION",
    "build_prompt",
    "build_resume_prompt",
    "build_profile_optimization_prompt",
    "build_networking_prompt",
    "build_connection_message_prompt",
]
