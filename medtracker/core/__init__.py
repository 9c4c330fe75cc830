"""
Shared building blocks: clock helpers, response schemas and middleware.
"""
