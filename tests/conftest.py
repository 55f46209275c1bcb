"""
Shared pytest fixtures for blogbuddy backend tests

Store fixtures are built on tests/fakes.py so services run without a network.
"""

import pytest
from typing import Dict

from app.services.article_catalog import ArticleCatalog
from tests.fakes import FakeSupabase, make_post


@pytest.fixture
def supabase() -> FakeSupabase:
    """Store seeded with two authors, their posts, likes and comments"""
    client = FakeSupabase()
    client.add_row('profiles', {'user_id': 'alice', 'username': 'alice', 'display_name': 'Alice A.', 'avatar_url': None})
    client.add_row('profiles', {'user_id': 'bob', 'username': 'bob', 'display_name': None, 'avatar_url': 'https://img/bob.png'})

    first = client.add_row('posts', make_post('alice', 'First published'))
    client.add_row('posts', make_post('alice', 'Alice draft', published=False))
    second = client.add_row('posts', make_post('bob', 'Bob published'))
    client.add_row('posts', make_post('bob', 'Bob draft', published=False))

    client.add_row('likes', {'post_id': first['id'], 'user_id': 'bob'})
    client.add_row('likes', {'post_id': first['id'], 'user_id': 'carol'})
    client.add_row('likes', {'post_id': second['id'], 'user_id': 'alice'})
    client.add_row('comments', {'post_id': first['id'], 'user_id': 'bob', 'content': 'Nice'})

    client.add_user('alice-token', 'alice')
    client.add_user('bob-token', 'bob')
    client.calls.clear()
    return client


@pytest.fixture
def post_ids(supabase) -> Dict[str, str]:
    """Post ids of the seeded store by title"""
    return {row['title']: row['id'] for row in supabase.tables['posts']}


@pytest.fixture(autouse=True)
def fresh_catalogs():
    """Every test starts without any catalog sessions"""
    ArticleCatalog.reset_sessions()
    yield
    ArticleCatalog.reset_sessions()
