"""
Unit tests for app/services/profile_service.py
"""

import asyncio
import copy
import pytest

from app.services.profile_service import ProfileService


def run(coro):
    return asyncio.run(coro)


class TestRefetch:
    """Tests for refetch()"""

    @pytest.mark.unit
    def test_explicit_user(self, supabase):
        profile = run(ProfileService(supabase, user_id='bob').refetch())
        assert profile['username'] == 'bob'

    @pytest.mark.unit
    def test_defaults_to_viewer(self, supabase):
        profile = run(ProfileService(supabase, viewer_id='alice').refetch())
        assert profile['display_name'] == 'Alice A.'

    @pytest.mark.unit
    def test_no_target_skips_store(self, supabase):
        service = ProfileService(supabase)
        assert run(service.refetch()) is None
        assert supabase.calls == []
        assert service.error is None

    @pytest.mark.unit
    def test_missing_profile_sets_error(self, supabase):
        service = ProfileService(supabase, user_id='nobody')
        assert run(service.refetch()) is None
        assert 'nobody' in service.error

    @pytest.mark.unit
    def test_store_failure_sets_error(self, supabase):
        supabase.failing_tables.add('profiles')
        service = ProfileService(supabase, viewer_id='alice')
        run(service.refetch())
        assert service.profile is None
        assert 'profiles' in service.error
        assert service.loading is False


class TestUpdateProfile:
    """Tests for update_profile()"""

    @pytest.mark.unit
    def test_owner_can_update(self, supabase):
        service = ProfileService(supabase, viewer_id='alice')
        result = run(service.update_profile({'bio': 'Writes about Python'}))

        assert result.ok
        assert result.data['bio'] == 'Writes about Python'
        assert service.profile['bio'] == 'Writes about Python'

    @pytest.mark.unit
    def test_other_user_is_unauthorized(self, supabase):
        """Non-owner update fails without touching the store"""
        before = copy.deepcopy(supabase.tables['profiles'])
        service = ProfileService(supabase, viewer_id='bob', user_id='alice')
        result = run(service.update_profile({'bio': 'hacked'}))

        assert result.error == 'Unauthorized'
        assert result.error_type == 'unauthorized'
        assert supabase.calls == []
        assert supabase.tables['profiles'] == before

    @pytest.mark.unit
    def test_anonymous_is_unauthorized(self, supabase):
        result = run(ProfileService(supabase, user_id='alice').update_profile({'bio': 'x'}))
        assert result.error_type == 'unauthorized'
        assert supabase.calls == []
