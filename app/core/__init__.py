"""
Core package.

Application settings and the dependency container.
"""
