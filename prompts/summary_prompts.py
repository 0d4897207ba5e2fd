"""Summary styles and the instruction templates behind them.

Every template embeds the raw fetched page body verbatim; the model is told
it is looking at HTML and asked not to say so in its answer.
"""

from __future__ import annotations

from enum import Enum

# ── System instruction ─────────────────────────────────────────────────

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes articles in various formats. "
    "Provide clear, accurate, and well-structured summaries."
)

_PREAMBLE = "You are given html content as article."
_NO_HTML_MENTION = "in your output dont mention that you were given html content"


# ── Styles ─────────────────────────────────────────────────────────────

class SummaryStyle(str, Enum):
    CONCISE = "concise"
    BULLET = "bullet"
    ELI5 = "eli5"
    EXECUTIVE = "executive"
    DETAILED = "detailed"
    PROSCONS = "proscons"
    FACTS = "facts"

    @classmethod
    def _missing_(cls, value: object) -> SummaryStyle:
        # Unknown tags (and None) fall back to the concise paragraph.
        return cls.CONCISE

    @classmethod
    def resolve(cls, tag: str | SummaryStyle | None) -> SummaryStyle:
        return cls(tag)

    @property
    def label(self) -> str:
        return _OPTIONS[self][0]

    @property
    def description(self) -> str:
        return _OPTIONS[self][1]


_OPTIONS: dict[SummaryStyle, tuple[str, str]] = {
    SummaryStyle.CONCISE: ("Concise Paragraph", "A single, clear summary paragraph of the article."),
    SummaryStyle.BULLET: ("Bullet Points", "A list of 5–7 key takeaways."),
    SummaryStyle.ELI5: (
        "Explain Like I'm 5 (ELI5)",
        "Simplified, beginner-friendly version — good for all audiences.",
    ),
    SummaryStyle.EXECUTIVE: ("Executive Summary", "High-level insights for busy professionals."),
    SummaryStyle.DETAILED: (
        "Detailed Breakdown",
        "A multi-paragraph structured summary: introduction, body, conclusion.",
    ),
    SummaryStyle.PROSCONS: (
        "Pros & Cons",
        "For reviews or opinion articles, show advantages/disadvantages of the article.",
    ),
    SummaryStyle.FACTS: ("Key Facts & Statistics", "Only extract factual data or stats."),
}


# ── Templates ──────────────────────────────────────────────────────────

_TEMPLATES: dict[SummaryStyle, str] = {
    SummaryStyle.CONCISE: (
        f" {_PREAMBLE} Please provide a single, clear summary paragraph of this article. "
        f"Focus on the main points and keep it concise and {_NO_HTML_MENTION}: {{content}}"
    ),
    SummaryStyle.BULLET: (
        f"{_PREAMBLE} Please provide 5-7 key bullet points summarizing the main takeaways "
        f"from this article and {_NO_HTML_MENTION}: {{content}}"
    ),
    SummaryStyle.ELI5: (
        f"{_PREAMBLE} Please explain this article in simple terms, as if explaining it to a "
        f"5-year-old. Use basic language and avoid complex terms and {_NO_HTML_MENTION}: {{content}}"
    ),
    SummaryStyle.EXECUTIVE: (
        f"{_PREAMBLE} Please provide an executive summary of this article. Focus on high-level "
        f"insights, key findings, and business implications and {_NO_HTML_MENTION}: {{content}}"
    ),
    SummaryStyle.DETAILED: (
        f"{_PREAMBLE} Please provide a detailed breakdown of this article with the following structure:\n"
        "1. Introduction: Main topic and context\n"
        "2. Body: Key points and supporting details\n"
        "3. Conclusion: Main takeaways and implications\n"
        "In your output dont mention that you were given html content\n"
        "Article: {content}"
    ),
    SummaryStyle.PROSCONS: (
        f"{_PREAMBLE} Please analyze this article and provide a list of pros and cons, "
        "advantages and disadvantages, or positive and negative aspects and "
        f"{_NO_HTML_MENTION}: {{content}}"
    ),
    SummaryStyle.FACTS: (
        f"{_PREAMBLE} Please extract only the key facts, statistics, and numerical data that "
        f"is related to this article. Focus on verifiable information and {_NO_HTML_MENTION}: {{content}}"
    ),
}


def build_prompt(style: str | SummaryStyle | None, content: str) -> str:
    """Return the user instruction for *style* with *content* embedded in full."""
    return _TEMPLATES[SummaryStyle.resolve(style)].format(content=content)
