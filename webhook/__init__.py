"""
Webhook module - FastAPI route handlers.

Includes:
- notify.py: /notify, /pai and /health
"""

from webhook.notify import USAGE_TEXT, router as notify_router

__all__ = ["notify_router", "USAGE_TEXT"]
