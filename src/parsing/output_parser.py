from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from keyprompt.models import PromptType

FALLBACK_TEMPLATES = {
    "photography": "A professional photograph featuring {keyword} with dramatic lighting and artistic composition.",
    "vector": "A clean vector illustration of {keyword} with modern design elements and vibrant colors.",
}


def looks_like_sentence(line: str) -> bool:
    return "." in line


def parse_lines(
    raw: str,
    limit: int,
    keep: Optional[Callable[[str], bool]] = None,
) -> List[str]:
    """
    Split a completion into trimmed, non-empty lines and keep the first `limit`.
    No deduplication: the parser selects lines, it does not judge them.
    """
    lines: List[str] = []
    if limit <= 0:
        return lines
    for line in raw.split("\n"):
        line = line.strip()
        if not line:
            continue
        if keep is not None and not keep(line):
            continue
        lines.append(line)
        if len(lines) >= limit:
            break
    return lines


def fallback_prompt(keyword: str, prompt_type: PromptType) -> str:
    return FALLBACK_TEMPLATES[prompt_type].format(keyword=keyword)


def parse_prompts(raw: str, keywords: List[str], prompt_type: PromptType) -> List[str]:
    """
    Pick one sentence-looking line per keyword, then pad missing slots with
    the style's fallback sentence for the keyword in that slot.
    Always returns exactly len(keywords) prompts.
    """
    prompts, _ = parse_prompts_counted(raw, keywords, prompt_type)
    return prompts


def parse_prompts_counted(
    raw: str, keywords: List[str], prompt_type: PromptType
) -> Tuple[List[str], int]:
    """Like parse_prompts, also returning how many slots got a fallback."""
    parsed = parse_lines(raw, len(keywords), keep=looks_like_sentence)
    return pad_with_fallbacks(parsed, keywords, prompt_type), len(keywords) - len(parsed)


def pad_with_fallbacks(
    prompts: List[str], keywords: List[str], prompt_type: PromptType
) -> List[str]:
    padded = list(prompts[: len(keywords)])
    for keyword in keywords[len(padded):]:
        padded.append(fallback_prompt(keyword, prompt_type))
    return padded
