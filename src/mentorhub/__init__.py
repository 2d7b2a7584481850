"""MentorHub — mentorship platform backend.

Accounts (mentors and mentees), scheduled mentoring sessions between
them, and feedback on those sessions. Everything behind a JWT-protected
JSON API.
"""

__version__ = "0.1.0"
