from __future__ import annotations
from typing import List

from keyprompt.models import PromptType

KEYWORD_SYSTEM_MESSAGE = (
    "You are a creative keyword generator. "
    "Generate unique, distinct keywords exactly as requested."
)

PROMPT_SYSTEM_MESSAGE = (
    "You are a creative prompt generator. Generate unique, detailed prompts "
    "exactly as requested, using each keyword once in the specified order."
)

_STYLE_LABEL = {
    "photography": "photography",
    "vector": "vector art",
}

_STYLE_DETAILS = {
    "photography": (
        "Include specific technical or artistic photography details "
        "(lighting, composition, camera settings, etc.)"
    ),
    "vector": "Include style, composition, or design details suitable for vector illustration",
}

_STYLE_FOCUS = {
    "photography": "professional photography techniques",
    "vector": "clean, scalable design elements",
}


def build_keyword_instruction(topic: str, count: int) -> str:
    return (
        f'Generate exactly {count} unique, creative keywords related to "{topic}".\n'
        "Each keyword should be:\n"
        "- Unique and distinct from others\n"
        f'- Directly related to the concept of "{topic}"\n'
        "- Suitable for creative projects\n"
        "- 1-3 words long\n"
        "\n"
        "Return only the keywords, one per line, without numbers, bullets, or other formatting."
    )


def build_prompt_instruction(keywords: List[str], prompt_type: PromptType) -> str:
    """
    One combined instruction for all keywords. The model is asked to keep
    the keyword order so line N of the answer belongs to keyword N.
    """
    n = len(keywords)
    numbered = ", ".join(f"{i + 1}. {k}" for i, k in enumerate(keywords))
    example = "\n".join(f"[Prompt using {k}]." for k in keywords[:3])

    return (
        f"Generate exactly {n} unique, detailed {_STYLE_LABEL[prompt_type]} prompts. "
        f"Use these keywords in order: {', '.join(keywords)}.\n"
        "\n"
        "Requirements for each prompt:\n"
        f"- Use the keywords in the exact order provided: {numbered}\n"
        "- Each prompt should be completely unique and different from the others\n"
        f"- {_STYLE_DETAILS[prompt_type]}\n"
        "- Each prompt should end with a period\n"
        "- Each prompt should be one complete sentence\n"
        f"- Focus on {_STYLE_FOCUS[prompt_type]}\n"
        "\n"
        f"Format: Return exactly {n} prompts, one per line, using each keyword once "
        "in the order provided. No numbering, bullets, or extra formatting.\n"
        "\n"
        "Example format:\n"
        f"{example}"
    )
