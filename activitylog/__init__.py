"""
Activity Log

Records who did what, to which entity, with which changes and when.
"""
