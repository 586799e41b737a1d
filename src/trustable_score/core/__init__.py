"""Core logic: local score estimation, quick wins, API client and models.

Framework-agnostic. Nothing here imports MCP or any server framework, so the
SDK can be used on its own.
"""
