"""
Web layer: routers and the error boundary.
"""
