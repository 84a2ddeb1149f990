"""
Posts Module - Blog and project posts stored as files
Each post is a .md/.mdx file whose YAML front matter carries the listing
metadata (title, publishedAt, summary, image, tag). Bodies are not compiled.
"""

import os
import re
from datetime import date, datetime

import yaml
from flask import current_app


FRONT_MATTER_RE = re.compile(r'\A---\s*\n(.*?)\n---\s*(?:\n|\Z)(.*)\Z', re.S)


class PostError(ValueError):
    """Raised when a post file cannot be parsed"""


def parse_published_at(value):
    """Normalize a front matter date to datetime.date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.strptime(value.strip()[:10], '%Y-%m-%d').date()
        except ValueError:
            raise PostError(f"Invalid publishedAt value: {value!r}")
    return None


def parse_post(raw, slug):
    """
    Parse the text of a post file

    Args:
        raw (str): File contents
        slug (str): URL slug for the post

    Returns:
        dict: slug, title, published_at, summary, image, tag, body

    Raises:
        PostError: If the front matter is not a YAML mapping
    """
    metadata = {}
    body = raw
    match = FRONT_MATTER_RE.match(raw)
    if match:
        try:
            metadata = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as e:
            raise PostError(f"Invalid front matter in {slug}: {e}")
        if not isinstance(metadata, dict):
            raise PostError(f"Front matter in {slug} is not a mapping")
        body = match.group(2)

    return {
        'slug': slug,
        'title': str(metadata.get('title') or slug.replace('-', ' ').title()),
        'published_at': parse_published_at(metadata.get('publishedAt')),
        'summary': str(metadata.get('summary') or ''),
        'image': metadata.get('image') or '',
        'tag': metadata.get('tag') or '',
        'body': body.strip(),
    }


def load_posts(kind):
    """
    Load every post of one kind, newest first

    Args:
        kind (str): 'blog' or 'work', the sub-folder of POSTS_FOLDER

    Returns:
        list: Parsed posts; unreadable files are logged and skipped
    """
    folder = os.path.join(current_app.config['POSTS_FOLDER'], kind)
    if not os.path.isdir(folder):
        current_app.logger.warning(f"Posts folder not found: {folder}")
        return []

    extensions = current_app.config.get('POST_EXTENSIONS', {'md', 'mdx'})
    posts = []
    for filename in sorted(os.listdir(folder)):
        stem, _, ext = filename.rpartition('.')
        if not stem or ext.lower() not in extensions:
            continue
        path = os.path.join(folder, filename)
        try:
            with open(path, 'r', encoding='utf-8') as file:
                posts.append(parse_post(file.read(), stem))
        except (OSError, PostError) as e:
            current_app.logger.error(f"Skipping post {path}: {str(e)}")

    posts.sort(key=lambda p: p['published_at'] or date.min, reverse=True)
    return posts


def get_post(kind, slug):
    """Return the post with the given slug, or None"""
    return next((p for p in load_posts(kind) if p['slug'] == slug), None)


__all__ = ['PostError', 'parse_published_at', 'parse_post', 'load_posts', 'get_post']
