"""
Unit tests for app/services/article_catalog.py

Tests the session-local demo catalog: creation, likes, deletion,
per-session isolation and the create-form signal.
"""

import pytest
from datetime import date

from app.models.article import ArticleCreate
from app.services.article_catalog import ArticleCatalog
from core.config import Config
from core.seed_data import SEED_ARTICLES


@pytest.fixture
def catalog():
    return ArticleCatalog.for_session('session-a')


def make_form(**overrides):
    fields = {
        'title': 'My Demo Post',
        'excerpt': 'Short',
        'content': 'Body text',
        'author': 'Tester',
        'category': 'Technology',
        'tags': 'one, two , three',
    }
    fields.update(overrides)
    return ArticleCreate(**fields)


class TestCreate:
    """Tests for create()"""

    @pytest.mark.unit
    def test_prepends_with_defaults(self, catalog):
        """New article goes first with parsed tags and fixed defaults"""
        article = catalog.create(make_form())

        assert catalog.articles[0] is article
        assert article.tags == ['one', 'two', 'three']
        assert article.read_time == '1 min read'
        assert article.featured is False
        assert article.liked is False
        assert article.likes_count == 0
        assert article.date == date.today().isoformat()
        assert article.id.isdigit()

    @pytest.mark.unit
    @pytest.mark.parametrize('missing', ['title', 'content', 'author'])
    def test_requires_title_content_author(self, catalog, missing):
        """Blank required field should leave the list unchanged"""
        before = len(catalog.articles)
        assert catalog.create(make_form(**{missing: ''})) is None
        assert len(catalog.articles) == before

    @pytest.mark.unit
    def test_created_article_is_searchable(self, catalog):
        catalog.create(make_form(title='Zebra Facts'))
        result = catalog.list_articles(search='zebra')
        assert [a.title for a in result] == ['Zebra Facts']

    @pytest.mark.unit
    def test_closes_create_form(self, catalog):
        catalog.request_create_form()
        catalog.create(make_form())
        assert catalog.show_create_form is False

    @pytest.mark.unit
    def test_seed_data_untouched(self, catalog):
        """Creations must not leak into the shared seed tuple"""
        catalog.create(make_form())
        assert len(SEED_ARTICLES) == 6
        assert all(seed['title'] != 'My Demo Post' for seed in SEED_ARTICLES)


class TestLikeAndDelete:
    """Tests for toggle_like() and delete()"""

    @pytest.mark.unit
    def test_toggle_like_twice_restores_state(self, catalog):
        article = catalog.toggle_like('1')
        assert article.liked is True
        assert article.likes_count == 1

        article = catalog.toggle_like('1')
        assert article.liked is False
        assert article.likes_count == 0

    @pytest.mark.unit
    def test_toggle_unknown_id(self, catalog):
        assert catalog.toggle_like('missing') is None

    @pytest.mark.unit
    def test_delete_removes_by_id(self, catalog):
        assert catalog.delete('2') is True
        assert catalog.get('2') is None
        assert catalog.delete('2') is False


class TestSessions:
    """Tests for per-session catalogs"""

    @pytest.mark.unit
    def test_same_session_same_catalog(self):
        assert ArticleCatalog.for_session('x') is ArticleCatalog.for_session('x')

    @pytest.mark.unit
    def test_default_session(self):
        assert ArticleCatalog.for_session(None) is ArticleCatalog.for_session('default')

    @pytest.mark.unit
    def test_sessions_are_isolated(self):
        first = ArticleCatalog.for_session('first')
        second = ArticleCatalog.for_session('second')

        first.create(make_form(title='Only Mine'))
        first.delete('1')
        first.toggle_like('2')

        assert second.list_articles(search='only mine') == []
        assert second.get('1') is not None
        assert second.get('2').liked is False

    @pytest.mark.unit
    def test_registry_is_capped(self, monkeypatch):
        """Oldest unused session is evicted once the cap is reached"""
        monkeypatch.setattr(Config, 'MAX_CATALOG_SESSIONS', 3)
        oldest = ArticleCatalog.for_session('s1')
        ArticleCatalog.for_session('s2')
        ArticleCatalog.for_session('s3')
        ArticleCatalog.for_session('s4')

        assert list(ArticleCatalog._sessions) == ['s2', 's3', 's4']
        assert ArticleCatalog.for_session('s1') is not oldest

    @pytest.mark.unit
    def test_recent_use_protects_from_eviction(self, monkeypatch):
        monkeypatch.setattr(Config, 'MAX_CATALOG_SESSIONS', 2)
        kept = ArticleCatalog.for_session('keep')
        ArticleCatalog.for_session('other')
        ArticleCatalog.for_session('keep')
        ArticleCatalog.for_session('newest')

        assert ArticleCatalog.for_session('keep') is kept
        assert 'other' not in ArticleCatalog._sessions


class TestCreateFormSignal:
    """Tests for request_create_form()"""

    @pytest.mark.unit
    def test_opens_form(self, catalog):
        assert catalog.show_create_form is False
        assert catalog.request_create_form() is True
        assert catalog.show_create_form is True

    @pytest.mark.unit
    def test_scoped_to_session(self, catalog):
        other = ArticleCatalog.for_session('session-b')
        catalog.request_create_form()
        assert other.show_create_form is False
