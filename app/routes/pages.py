"""
API routes for the landing and about pages
"""

from fastapi import APIRouter

from app.models.article import Article
from app.models.feed import FeedCard, HomePageResponse
from core.config import Config
from core.seed_data import SEED_ARTICLES

router = APIRouter()

ABOUT_PAGE = {
    "title": "About BlogBuddy",
    "intro": (
        "We're passionate about sharing knowledge and helping developers grow their skills through "
        "high-quality content, practical tutorials, and insights from the tech community."
    ),
    "values": [
        {
            "title": "Knowledge Sharing",
            "description": "We believe in the power of sharing knowledge to help the developer community grow and thrive."
        },
        {
            "title": "Community First",
            "description": "Our content is created by developers, for developers, with real-world experience and practical insights."
        },
        {
            "title": "Quality Focus",
            "description": "Every article is carefully crafted to provide actionable insights and practical solutions."
        },
    ],
}


@router.get("/pages/home", response_model=HomePageResponse)
async def home_page():
    """Featured seed articles plus the most recent ones"""
    articles = [Article(**seed) for seed in SEED_ARTICLES]

    return HomePageResponse(
        featured=[FeedCard.from_article(a) for a in articles if a.featured],
        recent=[FeedCard.from_article(a) for a in articles[:Config.RECENT_POSTS_LIMIT]]
    )


@router.get("/pages/about")
async def about_page():
    """Static about page content"""
    return ABOUT_PAGE
