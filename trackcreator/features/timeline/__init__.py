"""
Timeline feature.

Time/pixel mapping, lane layout, snapping and the drag-and-drop state machine.
"""
