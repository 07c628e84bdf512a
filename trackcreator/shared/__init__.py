"""
Code shared by several features: API errors and the HTTP client.
"""
