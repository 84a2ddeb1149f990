"""
Pages Routes - Home, About and Gallery pages
"""

from datetime import datetime
from flask import render_template, request, current_app
from markupsafe import escape
import content
from utils.data import is_displayed
from utils.decorators import section_enabled
from utils.helpers import get_local_time
from utils.posts import load_posts
from . import pages_bp


@pages_bp.route('/')
@section_enabled('home')
def home():
    """Landing page - headline, subline and latest projects"""
    limit = current_app.config.get('HOME_PROJECTS_LIMIT', 2)
    projects = load_posts('work')[:limit]
    return render_template('home.html',
                           section=content.home,
                           projects=projects,
                           show_newsletter=is_displayed(content.newsletter))


@pages_bp.route('/about')
@section_enabled('about')
def about():
    """About page - each block is rendered only when its display flag is set"""
    about = content.about
    local_time = get_local_time(content.person['location'])
    return render_template('about.html',
                           section=about,
                           local_time=local_time,
                           show_intro=is_displayed(about['intro']),
                           show_work=is_displayed(about['work']),
                           show_studies=is_displayed(about['studies']),
                           show_technical=is_displayed(about['technical']),
                           show_calendar=is_displayed(about['calendar']),
                           show_avatar=is_displayed(about['avatar']),
                           show_toc=is_displayed(about['tableOfContent']))


@pages_bp.route('/gallery')
@section_enabled('gallery')
def gallery():
    """Photo gallery"""
    return render_template('gallery.html', section=content.gallery)


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for the enabled sections and every post"""
    base_url = request.url_root.rstrip('/')
    enabled = current_app.config.get('ENABLED_SECTIONS', ())
    today = datetime.now().strftime('%Y-%m-%d')

    section_paths = {
        'home': '/',
        'about': '/about',
        'work': '/work',
        'blog': '/blog',
        'gallery': '/gallery',
    }
    sitemap_entries = []
    for name, path in section_paths.items():
        if name not in enabled:
            continue
        sitemap_entries.append({
            'loc': f'{base_url}{path}',
            'changefreq': 'weekly',
            'priority': '1.0' if name == 'home' else '0.8',
            'lastmod': today
        })

    for kind in ('blog', 'work'):
        if kind not in enabled:
            continue
        for post in load_posts(kind):
            sitemap_entries.append({
                'loc': f"{base_url}/{kind}/{post['slug']}",
                'changefreq': 'monthly',
                'priority': '0.6',
                'lastmod': post['published_at'].isoformat() if post['published_at'] else today
            })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{escape(entry["loc"])}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /newsletter/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
