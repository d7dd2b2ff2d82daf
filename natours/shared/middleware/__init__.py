"""
Request middleware package.

Request timestamping and request logging.
"""
