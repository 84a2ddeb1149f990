"""
Blog Routes - Post listing and single posts
"""

from flask import render_template, abort
import content
from utils.decorators import section_enabled
from utils.helpers import render_post_body
from utils.posts import load_posts, get_post
from . import blog_bp


@blog_bp.route('')
@section_enabled('blog')
def index():
    """All blog posts, newest first"""
    return render_template('blog.html', section=content.blog, posts=load_posts('blog'))


@blog_bp.route('/<slug>')
@section_enabled('blog')
def post(slug):
    """Single blog post"""
    entry = get_post('blog', slug)
    if not entry:
        abort(404)
    return render_template('post.html',
                           section=content.blog,
                           post=entry,
                           body=render_post_body(entry['body']),
                           back_endpoint='blog.index')
