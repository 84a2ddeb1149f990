"""
Work Routes - Project listing and project pages
"""

from flask import render_template, abort
import content
from utils.decorators import section_enabled
from utils.helpers import render_post_body
from utils.posts import load_posts, get_post
from . import work_bp


@work_bp.route('')
@section_enabled('work')
def index():
    """All projects, newest first"""
    return render_template('work.html', section=content.work, projects=load_posts('work'))


@work_bp.route('/<slug>')
@section_enabled('work')
def project(slug):
    """Project detail page"""
    entry = get_post('work', slug)
    if not entry:
        abort(404)
    return render_template('post.html',
                           section=content.work,
                           post=entry,
                           body=render_post_body(entry['body']),
                           back_endpoint='work.index')
