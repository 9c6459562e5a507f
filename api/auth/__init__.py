"""
User accounts, access tokens and the admin gate used by every router.
"""
