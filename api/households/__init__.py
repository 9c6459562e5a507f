"""
Household membership: which family each person belongs to.
"""
