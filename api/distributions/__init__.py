"""
Distributions: family enrollment in donation campaigns.
"""
