"""
Domain name detector - report output
"""

from .writer import ReportWriter

__all__ = ['ReportWriter']
