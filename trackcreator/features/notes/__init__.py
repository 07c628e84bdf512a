"""
Notes feature.

Note entity, the local note collection (NoteStore) and its remote API client.
"""
