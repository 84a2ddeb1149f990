"""
UI Helper Functions for Navigation and Blueprint-Specific Styling
=================================================================

Navigation entries are built from the content sections (their `label`),
filtered by the ENABLED_SECTIONS setting. Each blueprint may also ship its
own CSS/JS, loaded only on its pages.

Usage:
1. Add the CSS/JS file under static/
2. List it in the maps below
3. base.html includes it automatically
"""

from flask import current_app, request, url_for
from typing import List, Dict, Optional


# Header order: (section name, endpoint)
NAVIGATION = (
    ('home', 'pages.home'),
    ('about', 'pages.about'),
    ('work', 'work.index'),
    ('blog', 'blog.index'),
    ('gallery', 'pages.gallery'),
)


def get_navigation(active_endpoint: Optional[str] = None) -> List[Dict[str, object]]:
    """
    Navigation items for the site header

    Args:
        active_endpoint: Endpoint of the current request, marks the active item

    Returns:
        list: dicts with label, url and active flag

    Example:
        >>> get_navigation('pages.about')[1]
        {'name': 'about', 'label': 'About', 'url': '/about', 'active': True}
    """
    from .data import get_section

    enabled = current_app.config.get('ENABLED_SECTIONS', ())
    items = []
    for name, endpoint in NAVIGATION:
        if name not in enabled:
            continue
        blueprint = endpoint.split('.')[0]
        active = active_endpoint == endpoint or (
            blueprint in ('blog', 'work') and bool(active_endpoint) and active_endpoint.startswith(blueprint + '.')
        )
        items.append({
            'name': name,
            'label': get_section(name)['label'],
            'url': url_for(endpoint),
            'active': active,
        })
    return items


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('pages')
        ['css/pages/pages.css']
    """
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'pages': [
            'css/pages/pages.css',
        ],
        'blog': [
            'css/pages/posts.css',
        ],
        'work': [
            'css/pages/posts.css',
        ],
    }

    return blueprint_css_map.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """JavaScript files for a blueprint"""
    if not blueprint_name:
        return []

    blueprint_js_map = {
        'pages': [
            'js/clock.js',
        ],
    }

    return blueprint_js_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, object]:
    """
    Assets of the blueprint handling the current request

    Returns:
        dict: blueprint_styles, blueprint_scripts, current_blueprint
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS classes for the <body> of a page

    Example:
        >>> get_page_specific_class('blog', 'post')
        'page-blog page-blog-post'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
