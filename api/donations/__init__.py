"""
Donation campaigns.
"""
