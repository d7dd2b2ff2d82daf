"""
Tours bounded context — domain layer.
"""
