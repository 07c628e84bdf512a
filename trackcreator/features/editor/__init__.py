"""
Editor feature.

Scoped editing session for one song and display formatting helpers.
"""
