"""
Work Blueprint - Project listing and project pages
"""

from flask import Blueprint

work_bp = Blueprint('work', __name__, url_prefix='/work')

from . import routes
