"""
Decorators Module - Section gating for views
"""

from functools import wraps
from flask import abort, current_app


def section_enabled(name):
    """Decorator to return 404 when a section is switched off in ENABLED_SECTIONS"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if name not in current_app.config.get('ENABLED_SECTIONS', ()):
                current_app.logger.debug(f"Section {name} is disabled")
                abort(404)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def display_required(get_block):
    """Decorator to return 404 unless the content block's display flag is set

    Args:
        get_block: Callable returning the block, looked up on every request
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from .data import is_displayed
            if not is_displayed(get_block()):
                abort(404)
            return f(*args, **kwargs)
        return decorated_function
    return decorator
