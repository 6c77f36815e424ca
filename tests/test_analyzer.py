import json

import httpx

from app.config.action_sets import ACTION_SETS, PROMPT_FALLBACK_ACTIONS, THIN_CONTENT_ACTIONS, URL_ONLY_ACTIONS
from app.core.exceptions import UpstreamServiceError
from app.main import app
from app.modules.scraper.fetcher import PageFetcher, get_page_fetcher

BLOG_URL = "https://example.com/blog/how-we-ship"
BLOG_HTML = """
<html><head><title>How We Ship</title>
<meta name="description" content="Our release process"></head>
<body><article><p>{}</p></article></body></html>
""".format("We ship small changes every day and review each one carefully. " * 10)


def titles(actions):
    return [a["title"] for a in actions]


def test_analyze_link_classifies_and_returns_first_set(client, llm, fetcher):
    fetcher.pages[BLOG_URL] = BLOG_HTML
    llm.replies.append('{"type": "blog post", "purpose": "Explains a release process"}')

    resp = client.post("/api/analyze-link", json={"link": BLOG_URL})

    assert resp.status_code == 200
    data = resp.json()
    assert data["type"] == "blog post"
    assert data["purpose"] == "Explains a release process"
    assert data["title"] == "How We Ship"
    assert len(data["actions"]) == 3
    assert titles(data["actions"]) == titles(ACTION_SETS["blog post"][0])
    assert data["totalActionSets"] == 6
    assert data["nextActionSet"] == 1
    assert "isDynamic" not in data
    assert "contentAvailable" not in data

    prompt = llm.calls[0]["prompt"]
    assert BLOG_URL in prompt
    assert "Page title: How We Ship" in prompt
    assert llm.calls[0]["temperature"] == 0.1


def test_analyze_link_tolerates_fenced_json(client, llm):
    llm.replies.append('```json\n{"type": "GitHub repository", "purpose": "A CLI tool"}\n```')

    data = client.post("/api/analyze-link", json={"link": "https://github.com/acme/tool"}).json()

    assert data["type"] == "GitHub repository"
    assert titles(data["actions"]) == titles(ACTION_SETS["GitHub repository"][0])


def test_analyze_link_omits_next_set_at_end_of_rotation(client, llm):
    llm.replies.append('{"type": "news article", "purpose": "Headline"}')

    data = client.post("/api/analyze-link", json={"link": "https://news.example.com/a", "actionSet": 5}).json()

    assert titles(data["actions"]) == titles(ACTION_SETS["news article"][5])
    assert "nextActionSet" not in data


def test_analyze_link_wraps_large_offsets(client, llm):
    llm.replies.append('{"type": "documentation", "purpose": "Docs"}')

    data = client.post("/api/analyze-link", json={"link": "https://docs.example.com", "actionSet": 8}).json()

    assert titles(data["actions"]) == titles(ACTION_SETS["documentation"][2])
    assert data["nextActionSet"] == 3


def test_analyze_link_invalid_url_is_insufficient(client, llm):
    resp = client.post("/api/analyze-link", json={"link": "not a url"})

    assert resp.status_code == 200
    assert resp.json() == {"type": "insufficient", "purpose": "Invalid URL provided", "actions": []}
    assert llm.calls == []


def test_analyze_link_requires_link(client):
    resp = client.post("/api/analyze-link", json={})

    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"


def test_analyze_link_unparsable_reply_falls_back_to_default(client, llm):
    llm.replies.append("I think this is a blog")

    data = client.post("/api/analyze-link", json={"link": BLOG_URL}).json()

    assert data["type"] == "unknown"
    assert data["purpose"] == "Web content ready for AI analysis"
    assert titles(data["actions"]) == titles(ACTION_SETS["default"][0])
    assert data["nextActionSet"] == 1
    assert data["totalActionSets"] == len(ACTION_SETS["default"])


def test_analyze_link_manual_type_skips_classification(client, llm):
    data = client.post(
        "/api/analyze-link",
        json={"link": BLOG_URL, "manualType": "portfolio", "actionSet": 1},
    ).json()

    assert data["type"] == "portfolio"
    assert data["purpose"] == "User-selected portfolio content"
    assert titles(data["actions"]) == titles(ACTION_SETS["portfolio"][1])
    assert llm.calls == []


def test_analyze_link_unknown_manual_type_is_classified(client, llm):
    llm.replies.append('{"type": "forum post", "purpose": "A thread"}')

    data = client.post("/api/analyze-link", json={"link": BLOG_URL, "manualType": "recipe"}).json()

    assert data["type"] == "forum post"
    assert len(llm.calls) == 1


def test_analyze_link_generates_dynamic_actions_after_last_set(client, llm):
    dynamic = [
        {"title": "Release Checklist", "description": "Turn the post into a checklist", "icon": "✅"},
        {"title": "Team Retro", "description": "Draft retro questions", "icon": "🔁"},
        {"title": "Tweet Thread", "description": "Summarize as a thread", "icon": "🐦"},
    ]
    llm.replies.append('{"type": "blog post", "purpose": "Release process"}')
    llm.replies.append(json.dumps({"actions": dynamic}))

    data = client.post(
        "/api/analyze-link",
        json={"link": BLOG_URL, "actionSet": 5, "generateDynamicActions": True},
    ).json()

    assert data["isDynamic"] is True
    assert titles(data["actions"]) == ["Release Checklist", "Team Retro", "Tweet Thread"]
    assert "nextActionSet" not in data
    assert llm.calls[1]["temperature"] == 0.7
    assert llm.calls[1]["max_tokens"] == 500


def test_dynamic_actions_fall_back_to_default_set(client, llm):
    llm.replies.append('{"type": "blog post", "purpose": "Release process"}')
    llm.replies.append(UpstreamServiceError("AI request failed"))

    data = client.post(
        "/api/analyze-link",
        json={"link": BLOG_URL, "actionSet": 5, "generateDynamicActions": True},
    ).json()

    assert data["isDynamic"] is True
    assert titles(data["actions"]) == titles(ACTION_SETS["default"][0])


def test_analyze_link_youtube_with_transcript(client, llm, transcripts):
    transcripts.transcript = "welcome to the channel"
    llm.replies.append('{"type": "YouTube video", "purpose": "A tutorial"}')

    data = client.post("/api/analyze-link", json={"link": "https://www.youtube.com/watch?v=abc123XYZ"}).json()

    assert transcripts.requested == ["abc123XYZ"]
    assert data["contentAvailable"] is True
    assert data["contentAnalysis"] == "Video summary"
    assert titles(data["actions"]) == titles(ACTION_SETS["YouTube video"][0])
    assert "Detected type: YouTube video" in llm.calls[0]["prompt"]


def test_analyze_link_youtube_without_transcript(client, llm):
    llm.replies.append('{"type": "YouTube sitcom", "purpose": "An episode"}')

    data = client.post("/api/analyze-link", json={"link": "https://youtu.be/xyz987"}).json()

    assert data["contentAvailable"] is False
    assert "Transcript could not be retrieved" in data["contentMessage"]
    assert titles(data["actions"]) == titles(ACTION_SETS["YouTube sitcom"][0])


def test_analyze_link_ai_failure_is_bad_gateway(client, llm):
    llm.replies.append(UpstreamServiceError("AI request failed"))

    resp = client.post("/api/analyze-link", json={"link": BLOG_URL})

    assert resp.status_code == 502
    assert resp.json()["code"] == "SERVICE_UNAVAILABLE"


def test_analyze_url_returns_suggested_actions(client, llm, fetcher):
    fetcher.pages[BLOG_URL] = BLOG_HTML
    suggested = [
        {"title": "Summarize", "description": "Short summary", "prompt": "Summarize this post"},
        {"title": "Quiz", "description": "Make a quiz", "prompt": "Write five questions"},
        {"title": "Broken"},
    ]
    llm.replies.append(json.dumps(suggested))

    resp = client.post("/api/analyze-url", json={"url": BLOG_URL})

    assert resp.status_code == 200
    assert resp.json() == suggested[:2]
    assert llm.calls[0]["max_tokens"] == 512


def test_analyze_url_unreachable_page_uses_url_actions(client, llm):
    data = client.post("/api/analyze-url", json={"url": "https://gone.example.com"}).json()

    assert titles(data) == titles(URL_ONLY_ACTIONS)
    assert llm.calls == []


def test_analyze_url_thin_page(client, llm, fetcher):
    fetcher.pages["https://thin.example.com"] = "<html><head><title>Hi</title></head><body>tiny</body></html>"

    data = client.post("/api/analyze-url", json={"url": "https://thin.example.com"}).json()

    assert titles(data) == titles(THIN_CONTENT_ACTIONS)


def test_analyze_url_unparsable_reply_uses_content_aware_fallback(client, llm, fetcher):
    url = "https://github.com/acme/tool"
    fetcher.pages[url] = BLOG_HTML
    llm.replies.append("Sure! Here are some ideas")

    data = client.post("/api/analyze-url", json={"url": url}).json()

    assert titles(data) == titles(PROMPT_FALLBACK_ACTIONS["github"])


def test_analyze_url_requires_groq_key(client, llm):
    llm.configured = False

    resp = client.post("/api/analyze-url", json={"url": BLOG_URL})

    assert resp.status_code == 500
    assert resp.json()["code"] == "CONFIGURATION_ERROR"


def test_generate_actions(client, llm):
    llm.replies.append('[{"title": "Cite", "description": "Make a citation", "prompt": "Cite this"}]')

    resp = client.post(
        "/api/generate-actions",
        json={"type": "news article", "purpose": "News", "content": "Body text", "url": BLOG_URL},
    )

    assert resp.status_code == 200
    assert resp.json() == [{"title": "Cite", "description": "Make a citation", "prompt": "Cite this"}]
    assert "Page type: news article" in llm.calls[0]["prompt"]


def test_generate_actions_requires_type_and_content(client):
    resp = client.post("/api/generate-actions", json={"type": "blog post"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing type or content"


def test_generate_actions_unparsable_reply(client, llm):
    llm.replies.append("no json here")

    resp = client.post("/api/generate-actions", json={"type": "blog post", "content": "Body"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to parse AI response"
    assert body["details"] == "no json here"


def use_real_fetcher(html=BLOG_HTML):
    fetcher = PageFetcher(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=html)))
    app.dependency_overrides[get_page_fetcher] = lambda: fetcher


def test_analyze_link_malformed_port_is_insufficient(client, llm):
    use_real_fetcher()

    resp = client.post("/api/analyze-link", json={"link": "http://example.com:notaport/page"})

    assert resp.status_code == 200
    assert resp.json()["type"] == "insufficient"
    assert llm.calls == []


def test_analyze_url_malformed_port_uses_url_only_actions(client, llm):
    use_real_fetcher()

    resp = client.post("/api/analyze-url", json={"url": "http://example.com:notaport/page"})

    assert resp.status_code == 200
    assert titles(resp.json()) == titles(URL_ONLY_ACTIONS)
    assert llm.calls == []


def test_dynamic_actions_tolerate_null_fields(client, llm):
    llm.replies.append('{"type": "blog post", "purpose": "Release process"}')
    llm.replies.append(json.dumps({"actions": [
        {"title": "Release Checklist", "description": None, "icon": None},
        {"title": None, "description": "No title"},
        {"title": "Tweet Thread", "description": ["not", "text"]},
    ]}))

    resp = client.post(
        "/api/analyze-link",
        json={"link": BLOG_URL, "actionSet": 5, "generateDynamicActions": True},
    )

    assert resp.status_code == 200
    assert resp.json()["actions"] == [{"title": "Release Checklist", "description": ""}]


def test_dynamic_actions_without_usable_items_fall_back(client, llm):
    llm.replies.append('{"type": "blog post", "purpose": "Release process"}')
    llm.replies.append(json.dumps({"actions": [{"title": None}, "Tweet Thread"]}))

    data = client.post(
        "/api/analyze-link",
        json={"link": BLOG_URL, "actionSet": 5, "generateDynamicActions": True},
    ).json()

    assert data["isDynamic"] is True
    assert titles(data["actions"]) == titles(ACTION_SETS["default"][0])


def test_generate_actions_drops_items_without_prompt(client, llm):
    llm.replies.append(json.dumps([
        {"title": "Cite", "description": "d", "prompt": None},
        {"title": "Quiz", "description": None, "prompt": "Write a quiz"},
    ]))

    resp = client.post("/api/generate-actions", json={"type": "news article", "content": "Body"})

    assert resp.status_code == 200
    assert resp.json() == [{"title": "Quiz", "description": "", "prompt": "Write a quiz"}]


def test_generate_actions_all_items_unusable(client, llm):
    reply = '[{"title": "Cite", "description": "d", "prompt": null}]'
    llm.replies.append(reply)

    resp = client.post("/api/generate-actions", json={"type": "news article", "content": "Body"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "AI_PARSE_ERROR"
    assert body["details"] == reply
