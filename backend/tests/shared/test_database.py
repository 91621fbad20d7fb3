"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import get_supabase_client, reset_client_cache


@pytest.fixture
def mock_settings():
    with patch("shared.database.get_settings") as mock:
        mock.return_value.supabase_url = "https://test.supabase.co"
        mock.return_value.supabase_service_role_key = "test-key"
        mock.return_value.supabase_timeout_seconds = 5.0
        yield mock.return_value


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.create_client")
    def test_get_supabase_client_creates_client(self, mock_create, mock_settings):
        """Should create client with the service role key and timeout."""
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        assert mock_create.call_args.args == ("https://test.supabase.co", "test-key")
        assert mock_create.call_args.kwargs["options"].postgrest_client_timeout == 5.0
        assert client is mock_create.return_value

    @patch("shared.database.create_client")
    def test_get_supabase_client_caches_client(self, mock_create, mock_settings):
        """Should cache the client and not recreate it."""
        mock_create.return_value = MagicMock()

        assert get_supabase_client() is get_supabase_client()
        mock_create.assert_called_once()

    @patch("shared.database.create_client")
    def test_reset_client_cache(self, mock_create, mock_settings):
        """Should create a new client after the cache is reset."""
        mock_create.side_effect = [MagicMock(), MagicMock()]

        first = get_supabase_client()
        reset_client_cache()
        second = get_supabase_client()

        assert first is not second
        assert mock_create.call_count == 2

    def test_missing_url_raises(self, mock_settings):
        mock_settings.supabase_url = ""

        with pytest.raises(RuntimeError, match="CATALOG_SUPABASE_URL") as exc_info:
            get_supabase_client()
        assert "SERVICE_ROLE_KEY" not in str(exc_info.value)

    def test_missing_key_raises(self, mock_settings):
        mock_settings.supabase_service_role_key = ""

        with pytest.raises(RuntimeError, match="CATALOG_SUPABASE_SERVICE_ROLE_KEY"):
            get_supabase_client()
