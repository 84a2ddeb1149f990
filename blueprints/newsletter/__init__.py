"""
Newsletter Blueprint - Subscription form processing
"""

from flask import Blueprint

newsletter_bp = Blueprint('newsletter', __name__, url_prefix='/newsletter')

from . import routes
