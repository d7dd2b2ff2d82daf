"""
Application layer package.

Use cases orchestrate domain ports. One module per operation.
"""
