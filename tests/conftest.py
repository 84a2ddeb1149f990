"""
Pytest fixtures for the portfolio application.
"""
import pytest

from app import create_app
from utils.security import reset_rate_limits


@pytest.fixture
def app():
    """Create an application configured for testing."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    """Test client for the application."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI runner for the application."""
    return app.test_cli_runner()


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Every test starts with an empty rate limiter."""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def posts_dir(tmp_path, app):
    """Point POSTS_FOLDER at an empty temporary directory."""
    (tmp_path / "blog").mkdir()
    (tmp_path / "work").mkdir()
    app.config['POSTS_FOLDER'] = str(tmp_path)
    return tmp_path
