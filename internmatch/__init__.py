"""
InternMatch
Internship matching between interns and organizations.

Architecture:
- PostgreSQL: Accounts (unique email, password hash, role tag)
- MongoDB: Intern profiles and organization roles (documents)
- Matching: Case-insensitive skill overlap, no external services
"""

__version__ = "1.0.0"
