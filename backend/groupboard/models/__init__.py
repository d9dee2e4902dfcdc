# groupboard/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Account, credentials and membership views
- Group: Community group with members, admins and posts
- Post: Announcement or event published in a group
"""
from .user import User
from .group import Group
from .post import Post
