"""
connectfour.interfaces - User interfaces for Connect Four

Presentation collaborators that drive a GameSession. They own the
"current session" reference and replace it on restart.
"""

# Don't import anything here to avoid circular imports
__all__ = []
