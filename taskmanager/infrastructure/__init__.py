"""
Infrastructure layer.
Database, authentication, storage and HTTP adapters.
"""
