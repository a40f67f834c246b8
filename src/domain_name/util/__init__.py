"""
Domain name detector - shared utilities
"""
