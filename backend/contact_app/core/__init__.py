"""
Core infrastructure: configuration, database, logging, middleware
"""
