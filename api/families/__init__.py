"""
Families, plus the household and distribution endpoints addressed through them.
"""
