"""
charchat: a small real-time chat relay for character personas.

A Starlette server exposes the character catalog over REST and one
WebSocket chat session per connection.
"""

__version__ = "0.1.0"
