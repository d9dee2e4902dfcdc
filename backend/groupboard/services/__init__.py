"""
Services Module

Domain logic behind the HTTP routes:
- accounts: registration and credential checks
- membership: creating, joining and leaving groups
- posting: publishing posts and reading a member's feed
- views: JSON representations of stored records
"""
