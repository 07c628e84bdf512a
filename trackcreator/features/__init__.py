"""
Feature modules of the track editor.

Each feature is split into:
- domain/: entities and repository interfaces
- application/: services, stores and controllers
- infrastructure/: remote API clients
"""
