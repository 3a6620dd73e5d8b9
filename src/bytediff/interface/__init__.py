"""
Interface layer package.

Outer surfaces of the application: the HTTP API and the command line.
"""
