"""
Security middleware package.

Secure response headers, request body size limit and rate limiting.
"""
