"""
Application layer - shared services for the editing features

This layer contains:
- Event bus system for view synchronization
- Result types returned by store/service operations
- Settings schema and validation
"""
