import pytest

from app.config.action_sets import ACTION_SETS
from app.modules.analyzer.catalog import resolve_action_sets, resolve_content_type, select_action_set


@pytest.mark.parametrize("content_type,expected", [
    ("blog post", "blog post"),
    ("GitHub Repository", "GitHub repository"),
    ("github repo", "GitHub repository"),
    ("technical article", "blog post"),
    ("product landing page", "product page"),
    ("youtube sitcom", "YouTube sitcom"),
    ("YouTube movie", "YouTube movie"),
    ("video", "YouTube video"),
    ("api documentation", "documentation"),
    ("user manual", "documentation"),
    ("breaking news", "news article"),
    ("design portfolio", "portfolio"),
    ("discussion thread", "forum post"),
    ("film review", "movie review"),
    ("PDF", "default"),
    ("", "default"),
])
def test_resolve_content_type(content_type, expected):
    assert resolve_content_type(content_type) == expected


def test_every_set_has_three_actions():
    for name, sets in ACTION_SETS.items():
        assert len(sets) == 6, name
        for action_set in sets:
            assert len(action_set) == 3
            for action in action_set:
                assert action["title"] and action["description"] and action["icon"]


def test_rotation_walks_sets_and_wraps():
    sets = resolve_action_sets("blog post")

    first = select_action_set(sets, 0)
    assert first.actions == sets[0]
    assert first.next_action_set == 1

    last = select_action_set(sets, 5)
    assert last.actions == sets[5]
    assert last.next_index == 0
    assert last.next_action_set is None
    assert last.exhausted

    wrapped = select_action_set(sets, 7)
    assert wrapped.index == 1
    assert wrapped.next_action_set == 2


def test_negative_offset_restarts_rotation():
    rotation = select_action_set(ACTION_SETS["default"], -3)
    assert rotation.index == 0
    assert rotation.total == 6


def test_single_set_never_reports_next():
    rotation = select_action_set([ACTION_SETS["default"][0]], 0)
    assert rotation.next_action_set is None
    assert not rotation.exhausted
