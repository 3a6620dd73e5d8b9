"""
Infrastructure layer package.

External dependencies and persistence: case stores, configuration
loading and logging setup.
"""
