"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and site admin creation
- db: Database configuration and connection management
- errors: Application error taxonomy mapped to HTTP status codes
- security: Password hashing and session token handling
"""
