"""FastAPI server adapter for design-bot.

Design intent:
- Keep business logic in `design_bot.pipeline` and below
- Keep server-specific concerns (routing, auth, error mapping) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from design_bot.server.app import create_app
