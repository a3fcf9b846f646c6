"""
Application layer.
DTOs and the services that orchestrate repositories and authorization rules.
"""
