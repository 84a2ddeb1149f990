"""
Security Module - Client IP lookup and rate limiting for public forms
"""

import threading
import time
from flask import request, current_app


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
_rate_limit_lock = threading.Lock()


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='newsletter'):
    """Check if IP is within rate limit"""
    client_ip = get_client_ip()
    current_time = time.time()
    max_requests = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', 10)
    window = current_app.config.get('RATE_LIMIT_WINDOW', 60)

    with _rate_limit_lock:
        # Clean old requests outside the window
        history = [
            (ts, ep) for ts, ep in RATE_LIMIT_REQUESTS.get(client_ip, [])
            if current_time - ts < window
        ]

        endpoint_requests = [ep for ts, ep in history if ep == endpoint]
        if len(endpoint_requests) >= max_requests:
            RATE_LIMIT_REQUESTS[client_ip] = history
            current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
            return False

        history.append((current_time, endpoint))
        RATE_LIMIT_REQUESTS[client_ip] = history
        return True


def reset_rate_limits():
    """Forget all recorded requests"""
    with _rate_limit_lock:
        RATE_LIMIT_REQUESTS.clear()


__all__ = ['get_client_ip', 'check_rate_limit', 'reset_rate_limits']
