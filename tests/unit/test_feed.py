"""
Unit tests for app/models/feed.py

Tests mapping of posts and seed articles onto FeedCard.
"""

import pytest

from app.models.article import Article
from app.models.feed import FeedCard, get_excerpt
from app.models.post import Post
from core.seed_data import SEED_ARTICLES


def make_post(**overrides):
    fields = {
        'id': 'p1',
        'user_id': 'alice',
        'title': 'Hello',
        'content': '<p>Hello <strong>world</strong></p>',
        'published': True,
        'created_at': '2024-01-01T12:00:00',
        'tags': None,
    }
    fields.update(overrides)
    return Post(**fields)


class TestGetExcerpt:
    """Tests for get_excerpt()"""

    @pytest.mark.unit
    def test_strips_html(self):
        assert get_excerpt('<p>Hello <strong>world</strong></p>') == 'Hello world'

    @pytest.mark.unit
    def test_truncates_long_text(self):
        result = get_excerpt('a' * 200)
        assert result == 'a' * 150 + '...'

    @pytest.mark.unit
    def test_keeps_text_at_limit(self):
        assert get_excerpt('b' * 150) == 'b' * 150


class TestFromPost:
    """Tests for FeedCard.from_post()"""

    @pytest.mark.unit
    def test_uses_display_name(self):
        post = make_post(profiles={'username': 'alice', 'display_name': 'Alice A.', 'avatar_url': 'a.png'})
        card = FeedCard.from_post(post)
        assert card.source == 'post'
        assert card.author_name == 'Alice A.'
        assert card.author_avatar == 'a.png'

    @pytest.mark.unit
    def test_falls_back_to_username(self):
        post = make_post(profiles={'username': 'bob', 'display_name': None})
        assert FeedCard.from_post(post).author_name == 'bob'

    @pytest.mark.unit
    def test_without_profile(self):
        card = FeedCard.from_post(make_post())
        assert card.author_name == 'Unknown'
        assert card.tags == []

    @pytest.mark.unit
    def test_excerpt_fallback(self):
        assert FeedCard.from_post(make_post()).excerpt == 'Hello world'
        assert FeedCard.from_post(make_post(excerpt='Custom')).excerpt == 'Custom'


class TestFromArticle:
    """Tests for FeedCard.from_article()"""

    @pytest.mark.unit
    def test_maps_seed_article(self):
        card = FeedCard.from_article(Article(**SEED_ARTICLES[0]))
        assert card.source == 'article'
        assert card.author_name == 'Sarah Johnson'
        assert card.image == SEED_ARTICLES[0]['banner_image']
        assert card.read_time == '5 min read'
        assert card.featured is True
        assert card.tags == ['React', 'JavaScript', 'Frontend']
