"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from a request (or request-like object)."""
    if request_obj is None:
        from flask import request, has_request_context
        request_obj = request if has_request_context() else None

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Set on WebSocket requests
    }
