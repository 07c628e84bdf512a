"""
User interface adapters.
"""
