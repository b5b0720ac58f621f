"""
Prompts for model-backed title and summary derivation.
"""

from typing import Final

TITLE_PROMPT: Final[str] = """Generate a concise title for this note in 2-4 words.
Make it descriptive and professional.
Only return the title, nothing else.

{content}"""

SUMMARY_PROMPT: Final[str] = """You are summarizing TEXT CONTENT from a note.
This is plain text, not an image or visual content.
Create a brief summary of this note content.
Keep it under 100 characters and focus on key points.
Make it clear and informative.
Only return the summary, nothing else.

{content}"""


def build_title_prompt(content: str) -> str:
    return TITLE_PROMPT.format(content=content)


def build_summary_prompt(content: str) -> str:
    return SUMMARY_PROMPT.format(content=content)
