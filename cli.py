"""
Content CLI - Author tools for the content registry

Usage:
    flask content check     # list image paths missing from static/
    flask content summary   # counts of the authored content
"""

import os
import click
from flask import current_app
from flask.cli import AppGroup
from utils.data import SECTION_NAMES, get_section


content_cli = AppGroup('content', help='Inspect the site content.')

IMAGE_KEYS = ('src', 'avatar')


def iter_image_paths(value, trail=''):
    """Yield (location, path) for every image path in a content value"""
    if hasattr(value, 'items'):
        for key, item in value.items():
            where = f'{trail}.{key}' if trail else key
            if key in IMAGE_KEYS and isinstance(item, str):
                yield where, item
            else:
                yield from iter_image_paths(item, where)
    elif isinstance(value, tuple):
        for index, item in enumerate(value):
            yield from iter_image_paths(item, f'{trail}[{index}]')


def find_missing_assets(static_folder):
    """
    Image paths referenced by the registry that do not exist on disk

    Returns:
        list: (location, path) pairs
    """
    missing = []
    for name in SECTION_NAMES:
        for where, path in iter_image_paths(get_section(name), name):
            if not os.path.isfile(os.path.join(static_folder, path.lstrip('/'))):
                missing.append((where, path))
    return missing


@content_cli.command('check')
def check_command():
    """Report registry image paths missing from the static folder."""
    missing = find_missing_assets(current_app.static_folder)
    if not missing:
        click.echo('✓ All content images found')
        return
    for where, path in missing:
        click.echo(f'✗ {where}: {path}', err=True)
    click.echo(f'{len(missing)} missing image(s)', err=True)
    raise SystemExit(1)


@content_cli.command('summary')
def summary_command():
    """Print counts of the authored content."""
    from utils.posts import load_posts

    about = get_section('about')
    click.echo(f"Person: {get_section('person')['name']}")
    click.echo(f"Social links: {len(get_section('social'))}")
    click.echo(f"Experiences: {len(about['work']['experiences'])}")
    click.echo(f"Institutions: {len(about['studies']['institutions'])}")
    click.echo(f"Gallery images: {len(get_section('gallery')['images'])}")
    click.echo(f"Blog posts: {len(load_posts('blog'))}")
    click.echo(f"Projects: {len(load_posts('work'))}")
