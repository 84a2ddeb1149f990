"""
Helpers Module - Utility functions for templates and pages
"""

import re
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from flask import current_app
from markupsafe import Markup, escape


def get_local_time(timezone_name, now=None):
    """
    Current time in the given IANA time zone

    Args:
        timezone_name (str): e.g. 'Asia/Kolkata'
        now (datetime, optional): Aware datetime to convert instead of now

    Returns:
        datetime or None if the zone is unknown
    """
    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        current_app.logger.warning(f"Unknown time zone {timezone_name!r}: {str(e)}")
        return None
    if now is None:
        return datetime.now(zone)
    return now.astimezone(zone)


def format_date(value, fmt='%B %d, %Y'):
    """Jinja filter: format a date, empty string for missing dates"""
    if not value:
        return ''
    return value.strftime(fmt)


def render_post_body(text):
    """Normalize a post body into escaped HTML paragraphs.

    - Removes <script> and <style> blocks
    - Escapes everything else, so markup in the source shows as text
    - Double newlines start a new paragraph, single newlines become <br>
    - Lines starting with '#' become headings (h2-h3)
    """
    if not text:
        return Markup('')

    # Normalize newlines and drop script/style blocks
    txt = text.replace('\r\n', '\n').replace('\r', '\n')
    txt = re.sub(r'<(script|style).*?>.*?</\1>', '', txt, flags=re.I | re.S)
    txt = re.sub(r'\n\s*\n+', '\n\n', txt).strip()

    blocks = []
    for block in re.split(r'\n\s*\n', txt):
        block = block.strip()
        if not block:
            continue
        heading = re.match(r'^(#{1,3})\s+(.+)$', block)
        if heading and '\n' not in block:
            level = max(2, len(heading.group(1)))
            blocks.append(f'<h{level}>{escape(heading.group(2))}</h{level}>')
            continue
        lines = [str(escape(line)) for line in block.split('\n')]
        blocks.append('<p>' + '<br>\n'.join(lines) + '</p>')

    return Markup(''.join(blocks))


__all__ = [
    'get_local_time',
    'format_date',
    'render_post_body'
]
