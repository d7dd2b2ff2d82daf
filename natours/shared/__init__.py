"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Request timestamping and logging
- Security middleware and rate limiting
- Logging configuration
"""
