"""Tests for infusesecret/config.py: Settings loading and validation."""
from __future__ import annotations

import os
from unittest.mock import patch

import pytest


class TestSettings:
    def test_defaults(self):
        from infusesecret.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        assert s.app_name == "InfuseSecret"
        assert s.frontend_url == "http://localhost:3000"
        assert s.qr_service_url == "https://api.qrserver.com/v1/create-qr-code/"
        assert s.qr_size == 300
        assert s.db_url.startswith("sqlite")
        assert s.host == "127.0.0.1"
        assert s.port == 3001

    def test_env_overrides(self):
        from infusesecret.config import Settings

        env = {
            "FRONTEND_URL": "https://secret.example.com",
            "DB_URL": "sqlite:////tmp/other.db",
            "QR_SIZE": "512",
        }
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)
        assert s.frontend_url == "https://secret.example.com"
        assert s.db_url == "sqlite:////tmp/other.db"
        assert s.qr_size == 512

    def test_trailing_slash_stripped(self):
        """View links are built by appending to FRONTEND_URL, so a trailing
        slash must not produce a double slash."""
        from infusesecret.config import Settings

        env = {
            "FRONTEND_URL": "https://secret.example.com/",
            "API_URL": "https://api.example.com/api/",
        }
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)
        assert s.frontend_url == "https://secret.example.com"
        assert s.api_url == "https://api.example.com/api"

    def test_non_positive_qr_size_rejected(self):
        from infusesecret.config import Settings

        with patch.dict(os.environ, {"QR_SIZE": "0"}, clear=False):
            with pytest.raises(ValueError, match="QR_SIZE"):
                Settings(_env_file=None)

    def test_cors_origins_from_json_env(self):
        from infusesecret.config import Settings

        env = {"CORS_ORIGINS": '["https://a.example.com", "https://b.example.com"]'}
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)
        assert s.cors_origins == ["https://a.example.com", "https://b.example.com"]
