"""
API routers.
"""

from . import auth, tasks, comments, attachments, projects

__all__ = ["auth", "tasks", "comments", "attachments", "projects"]
