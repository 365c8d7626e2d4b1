"""
Jobify job-board API: authentication and credential management for users,
companies and admins.
"""

__version__ = "1.0.0"
