"""
Plan rules package: pension enrollment selection for roster reports.
"""

from .enrollment import is_upcoming_enrollee, upcoming_enrollees

__all__ = ["is_upcoming_enrollee", "upcoming_enrollees"]
