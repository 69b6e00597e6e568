"""
prompts.py - Decision prompt shown above each comparison

The prompt depends only on the two items: a shared category wins, then a
shared effort level, then evidence on both sides, then a generic question.
"""

from typing import Any, Mapping, Optional, Tuple, Union

from .models import Category, EffortLevel, Item, normalise_category

CATEGORY_PROMPTS = {
    Category.UI_UX: "Which would make users smile more?",
    Category.DATA_QUALITY: "Which data problem causes more pain?",
    Category.WORKFLOW: "Which bottleneck slows teams down most?",
    Category.BUG_FIX: "Which bug frustrates users more often?",
    Category.FEATURE: "Which feature would deliver more value?",
}
GENERIC_CATEGORY_PROMPT = "Which would deliver more value?"

QUICK_WIN_PROMPT = "Quick win question: which gives more bang for the buck?"
SIMILAR_EFFORT_PROMPT = "Both similar effort - which would deliver more value?"
EVIDENCE_PROMPT = "Based on evidence gathered, which has clearer impact?"
DEFAULT_PROMPT = "Which would you prioritize?"

PromptSubject = Union[Item, Mapping[str, Any]]


def _effort_key(value: Any) -> Optional[str]:
    # unlisted effort strings still compare equal to each other
    try:
        effort = EffortLevel.parse(value)
    except ValueError:
        return str(value).strip().upper()
    return effort.value if effort is not None else None


def _describe(item: PromptSubject) -> Tuple[Category, str, Optional[str], bool]:
    if isinstance(item, Item):
        effort = item.effort_level.value if item.effort_level is not None else None
        return item.category, item.category_key, effort, item.has_evidence

    evidence = (item.get("evidence_entries")
                or item.get("evidenceEntries")
                or item.get("evidence")
                or ())
    effort = item.get("effort_level", item.get("effortLevel"))
    has_evidence = evidence > 0 if isinstance(evidence, int) else len(evidence) > 0
    raw = item.get("category")
    return Category.parse(raw), normalise_category(raw), _effort_key(effort), has_evidence


def generate_decision_prompt(item_a: PromptSubject, item_b: PromptSubject) -> str:
    """Return the question to ask when comparing *item_a* with *item_b*."""
    category_a, key_a, effort_a, evidence_a = _describe(item_a)
    _, key_b, effort_b, evidence_b = _describe(item_b)

    if key_a == key_b:
        return CATEGORY_PROMPTS.get(category_a, GENERIC_CATEGORY_PROMPT)

    if effort_a == effort_b:
        if effort_a == EffortLevel.SMALL.value:
            return QUICK_WIN_PROMPT
        return SIMILAR_EFFORT_PROMPT

    if evidence_a and evidence_b:
        return EVIDENCE_PROMPT

    return DEFAULT_PROMPT
