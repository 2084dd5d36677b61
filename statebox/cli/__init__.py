"""
Statebox CLI

Commands:
- statebox replay - Replay an action log through a reducer
- statebox tokens - Show the reserved lifecycle action types
- statebox version - Show version information
"""
