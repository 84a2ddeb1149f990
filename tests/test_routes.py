"""
Tests for the rendered pages.
"""
from xml.etree import ElementTree

import pytest

import content
from extensions import db
from models import Subscriber
from utils.data import freeze


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_home_page(client):
    response = client.get('/')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'Developer and Tinkerer' in html
    assert "<br /> I build products for the web." in html
    assert "Amey Khaire&#39;s Portfolio" in html or "Amey Khaire's Portfolio" in html


def test_home_lists_latest_projects(client):
    html = client.get('/').get_data(as_text=True)
    assert 'Portfolio site' in html
    assert '/work/portfolio-site' in html


def test_navigation_uses_section_labels(client):
    html = client.get('/').get_data(as_text=True)
    positions = [html.index(f'>{label}</a>') for label in ('Home', 'About', 'Work', 'Blog', 'Gallery')]
    assert positions == sorted(positions)


def test_footer_social_links(client):
    html = client.get('/').get_data(as_text=True)
    for entry in content.social:
        assert entry['link'] in html


def test_hidden_newsletter_not_rendered(client):
    html = client.get('/').get_data(as_text=True)
    assert '/newsletter/subscribe' not in html


def test_about_renders_displayed_sections_only(client):
    response = client.get('/about')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'Work Experience' in html
    assert 'Studies' in html
    assert 'Introduction' in html
    assert 'Technical skills' not in html
    assert 'Figma' not in html


def test_about_keeps_experience_order(client):
    html = client.get('/about').get_data(as_text=True)
    assert html.index('Amazon') < html.index('Cybage')


def test_about_shows_person(client):
    html = client.get('/about').get_data(as_text=True)
    assert 'Amey Khaire' in html
    assert 'Asia/Kolkata' in html
    assert 'https://cal.com/amey-khaire' in html
    for language in ('English', 'Hindi', 'Marathi'):
        assert language in html


def test_gallery_page(client):
    html = client.get('/gallery').get_data(as_text=True)
    assert html.count('class="vertical"') == 5
    assert html.count('class="horizontal"') == 9
    assert '/images/gallery/img-14.jpg' in html


def test_blog_listing_newest_first(client):
    response = client.get('/blog')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'Writing about tech...' in html
    assert html.index('Building once, deploying everywhere') < html.index('What automating a JDK 17 migration')


def test_blog_post(client):
    response = client.get('/blog/jdk17-migration-lessons')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert '<h2>Start with the boring cases</h2>' in html
    assert 'November 03, 2023' in html


def test_unknown_post_is_404(client):
    assert client.get('/blog/does-not-exist').status_code == 404
    assert client.get('/work/does-not-exist').status_code == 404


def test_work_listing_and_project(client):
    html = client.get('/work').get_data(as_text=True)
    assert 'My projects' in html
    assert 'Card payment flow redesign' in html
    assert client.get('/work/payment-flow-redesign').status_code == 200


def test_disabled_section(app, client):
    app.config['ENABLED_SECTIONS'] = ('home', 'about', 'blog', 'work')
    assert client.get('/gallery').status_code == 404
    html = client.get('/').get_data(as_text=True)
    assert '>Gallery</a>' not in html


def test_sitemap_and_robots(client):
    sitemap = client.get('/sitemap.xml')
    assert sitemap.headers['Content-Type'].startswith('application/xml')
    xml = sitemap.get_data(as_text=True)
    assert '/blog/building-once-deploying-everywhere' in xml
    assert '<lastmod>2024-05-12</lastmod>' in xml
    robots = client.get('/robots.txt').get_data(as_text=True)
    assert 'Sitemap: http://localhost/sitemap.xml' in robots


def test_security_headers(client):
    response = client.get('/')
    assert response.headers['X-Content-Type-Options'] == 'nosniff'


class TestNewsletter:
    """Test newsletter subscription."""

    @pytest.fixture
    def shown_newsletter(self, monkeypatch):
        monkeypatch.setattr(content, 'newsletter', freeze({
            'display': True,
            'title': 'Subscribe',
            'description': 'Occasional notes.',
        }))

    def test_hidden_newsletter_rejects_posts(self, client):
        response = client.post('/newsletter/subscribe', data={'email': 'a@example.com'})
        assert response.status_code == 404

    def test_form_shown_when_displayed(self, client, shown_newsletter):
        html = client.get('/').get_data(as_text=True)
        assert '/newsletter/subscribe' in html

    def test_subscribe(self, app, client, shown_newsletter):
        response = client.post('/newsletter/subscribe', data={'email': ' Reader@Example.com '})
        assert response.status_code == 302
        with app.app_context():
            subscriber = Subscriber.query.filter_by(email='reader@example.com').first()
            assert subscriber is not None
            assert subscriber.is_active

    def test_duplicate_subscription(self, app, client, shown_newsletter):
        client.post('/newsletter/subscribe', data={'email': 'reader@example.com'})
        response = client.post('/newsletter/subscribe', data={'email': 'reader@example.com'},
                               follow_redirects=True)
        assert 'already subscribed' in response.get_data(as_text=True)
        with app.app_context():
            assert Subscriber.query.count() == 1

    def test_invalid_email(self, app, client, shown_newsletter):
        response = client.post('/newsletter/subscribe', data={'email': 'not-an-email'},
                               follow_redirects=True)
        assert 'valid email' in response.get_data(as_text=True)
        with app.app_context():
            assert Subscriber.query.count() == 0

    def test_honeypot(self, app, client, shown_newsletter):
        client.post('/newsletter/subscribe', data={'email': 'bot@example.com', 'website': 'spam'})
        with app.app_context():
            assert db.session.query(Subscriber).count() == 0

    def test_rate_limit(self, app, client, shown_newsletter):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 2
        for i in range(2):
            client.post('/newsletter/subscribe', data={'email': f'user{i}@example.com'})
        response = client.post('/newsletter/subscribe', data={'email': 'user9@example.com'},
                               follow_redirects=True)
        assert 'Too many requests.' in response.get_data(as_text=True)
        with app.app_context():
            assert Subscriber.query.count() == 2


class TestRegistryImages:
    """Registry image paths are served at the URLs the templates emit."""

    def test_avatar_is_served(self, client):
        html = client.get('/about').get_data(as_text=True)
        assert f'src="{content.person["avatar"]}"' in html
        response = client.get(content.person['avatar'])
        assert response.status_code == 200
        assert response.mimetype == 'image/png'

    def test_work_logos_are_served(self, client):
        for experience in content.about['work']['experiences']:
            for image in experience['images']:
                assert client.get(image['src']).status_code == 200

    def test_gallery_images_are_served(self, client):
        for image in content.gallery['images']:
            response = client.get(image['src'])
            assert response.status_code == 200
            assert response.mimetype == 'image/jpeg'

    def test_stylesheet_url(self, client):
        html = client.get('/').get_data(as_text=True)
        assert 'href="/css/site.css"' in html
        assert client.get('/css/site.css').status_code == 200

    def test_pages_still_win_over_static_files(self, client):
        assert client.get('/about').status_code == 200
        assert client.get('/blog/jdk17-migration-lessons').status_code == 200
        assert client.get('/images/missing.png').status_code == 404


def test_sitemap_escapes_urls(client, posts_dir):
    (posts_dir / "blog" / "tips&tricks.md").write_text("---\ntitle: Tips\npublishedAt: '2024-01-01'\n---\nbody")
    xml = client.get('/sitemap.xml').get_data(as_text=True)
    assert '/blog/tips&amp;tricks' in xml
    root = ElementTree.fromstring(xml.encode('utf-8'))
    locs = [el.text for el in root.iter('{http://www.sitemaps.org/schemas/sitemap/0.9}loc')]
    assert 'http://localhost/blog/tips&tricks' in locs


def test_subscriber_notice_escapes_email(app, client, monkeypatch):
    sent = []
    monkeypatch.setattr(content, 'newsletter', freeze({'display': True, 'title': 'S', 'description': 'D'}))
    monkeypatch.setattr('blueprints.newsletter.routes.send_telegram_notification', sent.append)
    client.post('/newsletter/subscribe', data={'email': '<x>@a.bc'})
    assert len(sent) == 1
    assert '&lt;x&gt;@a.bc' in sent[0]
    assert '<x>' not in sent[0]
