"""Quiz domain services: scoring and question progression.

Imported by the event router; these functions work on room state and the
transport seam only, keeping Socket.IO specifics out of quiz mechanics.
"""
