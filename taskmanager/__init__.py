"""
Task Manager API.
REST backend for users, tasks, projects, comments and attachments.
"""

__version__ = "1.0.0"
