"""
Pages Blueprint - Content pages backed by the registry
Handles: Home, About, Gallery, sitemap and robots.txt
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
