from typing import Optional

CLASSIFIABLE_TYPES = (
    "blog post, GitHub repository, YouTube video, YouTube sitcom, YouTube movie, documentation, "
    "product page, news article, portfolio, forum post, movie review, PDF, tweet, unknown"
)

ANALYZE_URL_SYSTEM_PROMPT = (
    "You are LinkMage, an expert at suggesting smart actions for any web page. Always respond with "
    "valid JSON only. No markdown, no extra text, just the JSON array."
)

GENERATE_ACTIONS_SYSTEM_PROMPT = "You are LinkMage. Always respond with valid JSON only. No extra text."


def _page_context(title: Optional[str], text: Optional[str]) -> str:
    lines = []
    if title:
        lines.append(f"Page title: {title}")
    if text:
        lines.append(f"Page content: {text[:1000]}")
    if not lines:
        return ""
    return "\n" + "\n".join(lines) + "\n"


def classification_prompt(
    link: str,
    youtube_type: str = "",
    title: Optional[str] = None,
    text: Optional[str] = None,
) -> str:
    context = _page_context(title, text)
    if youtube_type:
        return f"""You are LinkMage, analyzing a YouTube URL to determine content type and purpose.

URL to analyze: {link}
Detected type: {youtube_type}
{context}
Based on the URL and detected type, provide a brief purpose/summary in one sentence.

Respond with VALID JSON in this EXACT format:
{{
  "type": "{youtube_type}",
  "purpose": "brief_one_sentence_description_here"
}}"""

    return f"""You are LinkMage, analyzing a URL to determine content type and purpose.

URL to analyze: {link}
{context}
Analyze this URL and determine:
1. What type of content this likely is
2. A brief purpose/summary in one sentence

Respond with VALID JSON in this EXACT format:
{{
  "type": "content_type_here",
  "purpose": "brief_one_sentence_description_here"
}}

Choose type from: {CLASSIFIABLE_TYPES}"""


def dynamic_actions_prompt(link: str, content_type: str, summary: Optional[str] = None) -> str:
    summary_line = f"Content Summary: {summary}" if summary else ""
    return f"""You are LinkMage, generating unique AI actions for a {content_type}.

URL: {link}
{summary_line}

Generate 3 unique, creative, and contextually relevant actions that would be valuable for this specific content. These should be different from standard actions and tailored to this particular {content_type}.

Each action should have:
- A clear, actionable title
- A brief description explaining what it does
- An appropriate emoji icon

Respond with VALID JSON in this EXACT format:
{{
  "actions": [
    {{"title": "Action Title 1", "description": "Brief description of what this action does", "icon": "🎯"}},
    {{"title": "Action Title 2", "description": "Brief description of what this action does", "icon": "💡"}},
    {{"title": "Action Title 3", "description": "Brief description of what this action does", "icon": "🚀"}}
  ]
}}

Make the actions creative, specific to this content, and genuinely useful."""


def suggest_actions_prompt(title: str, text: str) -> str:
    return f"""You are LinkMage. A user pasted a link to a page titled "{title}". Based on the content below, suggest 3 helpful, smart actions the user might perform.

IMPORTANT: Respond with ONLY valid JSON in this exact format:
[
  {{ "title": "Action Title", "description": "Action description", "prompt": "Action prompt" }}
]

Do not include any other text, markdown, or formatting. Only the JSON array.

Page content:
{text}"""


def generate_actions_prompt(content_type: str, purpose: Optional[str], content: str, url: Optional[str]) -> str:
    return f"""You are LinkMage, an expert at suggesting smart, actionable things a user might want to do with a web page.

Page type: {content_type}
Purpose: {purpose}
URL: {url}
Content: {content[:1000]}

Suggest 3-5 highly relevant, actionable things a user might want to do with this page.

Respond with valid JSON in this format:
[
  {{
    "title": "Action title",
    "description": "What this action does",
    "prompt": "Prompt to use if the user selects this action"
  }}
]

No extra text, only the JSON array."""
