"""
In-memory article catalog for the listing page

Each session gets its own copy of the seed articles plus whatever it
creates. Nothing here is persisted or sent to the store.
"""

import copy
import logging
import time
from collections import OrderedDict
from datetime import date
from typing import List, Optional

from app.models.article import Article, ArticleCreate
from core.article_search import ArticleSearch
from core.config import Config
from core.page_signal import OPEN_CREATE_FORM, PageSignal
from core.seed_data import SEED_ARTICLES

logger = logging.getLogger(__name__)


class ArticleCatalog:
    """
    Session-local article list with like/delete/create and filtered listing.
    """

    # Live catalogs by session id, least recently used first
    _sessions: "OrderedDict[str, ArticleCatalog]" = OrderedDict()

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.articles: List[Article] = [
            Article(**copy.deepcopy(seed)) for seed in SEED_ARTICLES
        ]
        self.show_create_form = False

        self.signal = PageSignal(scope=session_id)
        self.signal.subscribe(OPEN_CREATE_FORM, self._open_create_form)

    @classmethod
    def for_session(cls, session_id: Optional[str] = None) -> "ArticleCatalog":
        """Get or create the catalog for a session, evicting the least recently used past the cap"""
        key = session_id or Config.DEFAULT_SESSION_ID
        catalog = cls._sessions.get(key)
        if catalog is not None:
            cls._sessions.move_to_end(key)
            return catalog

        catalog = cls(key)
        cls._sessions[key] = catalog
        logger.info(f"Created article catalog for session {key}")

        while len(cls._sessions) > Config.MAX_CATALOG_SESSIONS:
            evicted, _ = cls._sessions.popitem(last=False)
            logger.info(f"Evicted article catalog for session {evicted}")
        return catalog

    @classmethod
    def reset_sessions(cls):
        """Drop every session catalog"""
        cls._sessions.clear()

    def list_articles(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Article]:
        """Articles matching the category and search text, newest creations first"""
        articles = [article.model_dump() for article in self.articles]
        matches = ArticleSearch.filter_articles(articles, category=category, search=search)
        return [Article(**article) for article in matches]

    def get(self, article_id: str) -> Optional[Article]:
        for article in self.articles:
            if article.id == article_id:
                return article
        return None

    def create(self, form: ArticleCreate) -> Optional[Article]:
        """
        Prepend a new article built from the create-post form

        Args:
            form: Form fields; title, content and author are required

        Returns:
            The new article, or None when a required field is blank
        """
        if not form.title or not form.content or not form.author:
            logger.info(f"[{self.session_id}] Rejected create: title, content and author are required")
            return None

        article = Article(
            id=str(int(time.time() * 1000)),
            title=form.title,
            excerpt=form.excerpt,
            content=form.content,
            author=form.author,
            category=form.category,
            tags=ArticleSearch.parse_tags(form.tags),
            date=date.today().isoformat(),
            read_time=Config.DEMO_READ_TIME,
            featured=False,
            liked=False,
            likes_count=0,
        )
        self.articles.insert(0, article)
        self.show_create_form = False
        logger.info(f"[{self.session_id}] Created demo article {article.id}")
        return article

    def toggle_like(self, article_id: str) -> Optional[Article]:
        article = self.get(article_id)
        if article is None:
            return None
        article.likes_count += -1 if article.liked else 1
        article.liked = not article.liked
        return article

    def delete(self, article_id: str) -> bool:
        before = len(self.articles)
        self.articles = [article for article in self.articles if article.id != article_id]
        return len(self.articles) < before

    def request_create_form(self) -> bool:
        """Ask whoever listens on this session to open the create form"""
        self.signal.publish(OPEN_CREATE_FORM)
        return self.show_create_form

    def close_create_form(self):
        self.show_create_form = False

    def _open_create_form(self):
        self.show_create_form = True
