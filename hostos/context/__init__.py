"""
# Shared tools for the &hostos projects.
"""
