"""
Article Search Utility

Category filtering and free-text search over in-memory article lists.
Both filters compose with AND.
"""

from typing import Iterable, List, Mapping, Optional

from core.config import Config


class ArticleSearch:
    """Filters article dicts by category and search text"""

    SEARCH_FIELDS = ('title', 'excerpt', 'content', 'author')

    @staticmethod
    def is_all_categories(category: Optional[str]) -> bool:
        """Empty category and 'All' both mean no filter"""
        return not category or category == Config.ALL_CATEGORIES

    @staticmethod
    def matches_category(article: Mapping, category: Optional[str]) -> bool:
        if ArticleSearch.is_all_categories(category):
            return True
        return article.get('category') == category

    @staticmethod
    def matches_search(article: Mapping, search: Optional[str]) -> bool:
        """
        Case-insensitive substring match across title, excerpt, content, author and tags

        Args:
            article: Article fields
            search: Search text, matched as typed (blank or whitespace-only matches everything)

        Returns:
            True if any field contains the search text
        """
        if not search or not search.strip():
            return True
        term = search.lower()

        for field in ArticleSearch.SEARCH_FIELDS:
            value = article.get(field) or ''
            if term in value.lower():
                return True

        tags = article.get('tags')
        if isinstance(tags, list):
            return any(term in tag.lower() for tag in tags)
        return False

    @staticmethod
    def filter_articles(
        articles: Iterable[Mapping],
        category: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[Mapping]:
        """Keep articles matching both the category and the search text, preserving order"""
        return [
            article for article in articles
            if ArticleSearch.matches_category(article, category)
            and ArticleSearch.matches_search(article, search)
        ]

    @staticmethod
    def parse_tags(raw: Optional[str]) -> List[str]:
        """Split comma-separated tags, trimming and dropping empty entries"""
        if not raw:
            return []
        return [tag.strip() for tag in raw.split(',') if tag.strip()]
