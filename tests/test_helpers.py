"""
Tests for template helpers, rate limiting and notifications.
"""
from datetime import date, datetime, timezone

import pytest
from markupsafe import Markup

from utils.helpers import get_local_time, format_date, render_post_body
from utils.security import check_rate_limit, get_client_ip
from utils.notifications import send_telegram_notification
from utils.ui_helpers import get_navigation, get_page_specific_class, get_blueprint_styles


class TestRenderPostBody:
    """Test post body rendering."""

    def test_paragraphs_and_line_breaks(self):
        html = render_post_body("First line\nsecond line\n\n\n\nNext paragraph")
        assert html == Markup('<p>First line<br>\nsecond line</p><p>Next paragraph</p>')

    def test_escapes_markup(self):
        html = render_post_body("<b>bold</b> & more")
        assert '&lt;b&gt;bold&lt;/b&gt; &amp; more' in html

    def test_drops_scripts(self):
        html = render_post_body("before<script>alert(1)</script>after")
        assert 'alert' not in html
        assert html == Markup('<p>beforeafter</p>')

    def test_headings(self):
        html = render_post_body("# Title\n\n### Detail\n\ntext")
        assert html == Markup('<h2>Title</h2><h3>Detail</h3><p>text</p>')

    def test_empty(self):
        assert render_post_body('') == Markup('')


class TestLocalTime:
    """Test time zone helpers."""

    def test_converts_to_zone(self, app):
        now = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        with app.app_context():
            local = get_local_time('Asia/Kolkata', now=now)
        assert (local.hour, local.minute) == (5, 30)

    def test_unknown_zone(self, app):
        with app.app_context():
            assert get_local_time('Mars/Olympus_Mons') is None

    def test_current_time_is_aware(self, app):
        with app.app_context():
            assert get_local_time('Europe/Vienna').tzinfo is not None


def test_format_date():
    assert format_date(date(2024, 5, 12)) == 'May 12, 2024'
    assert format_date(None) == ''
    assert format_date(date(2024, 5, 12), '%Y') == '2024'


class TestRateLimit:
    """Test the in-process rate limiter."""

    def test_blocks_after_limit(self, app):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 3
        with app.test_request_context(environ_base={'REMOTE_ADDR': '10.0.0.1'}):
            assert [check_rate_limit('newsletter') for _ in range(4)] == [True, True, True, False]
            # Other endpoints have their own budget
            assert check_rate_limit('other')

    def test_separate_ips(self, app):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 1
        with app.test_request_context(environ_base={'REMOTE_ADDR': '10.0.0.1'}):
            assert check_rate_limit()
            assert not check_rate_limit()
        with app.test_request_context(environ_base={'REMOTE_ADDR': '10.0.0.2'}):
            assert check_rate_limit()

    def test_forwarded_ip(self, app):
        with app.test_request_context(headers={'X-Forwarded-For': '203.0.113.7, 10.0.0.1'}):
            assert get_client_ip() == '203.0.113.7'


class TestNotifications:
    """Test Telegram notifications."""

    def test_skipped_without_credentials(self, app):
        with app.app_context():
            assert send_telegram_notification('hello') is False

    def test_sends_with_credentials(self, app, monkeypatch):
        calls = []

        class FakeResponse:
            status_code = 200

        def fake_post(url, json=None, timeout=None):
            calls.append((url, json))
            return FakeResponse()

        monkeypatch.setattr('utils.notifications.requests.post', fake_post)
        app.config['SITE_TELEGRAM_BOT_TOKEN'] = 'token'
        app.config['SITE_TELEGRAM_CHAT_ID'] = '42'
        with app.app_context():
            assert send_telegram_notification('hello') is True
        assert calls[0][0] == 'https://api.telegram.org/bottoken/sendMessage'
        assert calls[0][1]['chat_id'] == '42'


class TestUiHelpers:
    """Test navigation and page classes."""

    def test_navigation(self, app):
        with app.test_request_context('/about'):
            items = get_navigation('pages.about')
        assert [item['label'] for item in items] == ['Home', 'About', 'Work', 'Blog', 'Gallery']
        assert [item['name'] for item in items if item['active']] == ['about']
        assert items[3]['url'] == '/blog'

    def test_navigation_marks_post_pages(self, app):
        with app.test_request_context('/blog/x'):
            items = get_navigation('blog.post')
        assert [item['name'] for item in items if item['active']] == ['blog']

    def test_page_class(self):
        assert get_page_specific_class('blog', 'post') == 'page-blog page-blog-post'
        assert get_page_specific_class(None) == 'page-default'

    def test_blueprint_styles(self):
        assert get_blueprint_styles('work') == ['css/pages/posts.css']
        assert get_blueprint_styles(None) == []
