"""
Camps: physical sites hosting families.
"""
