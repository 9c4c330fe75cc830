"""
Medical tracking record store and reminder alert client.
"""
