"""
People registered at the camps.
"""
