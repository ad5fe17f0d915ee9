"""Core business logic — receipt models, scoring rules, and identifiers.

This module is framework-agnostic. It has no dependency on MCP, Starlette,
or any server framework. The server layer and the MCP tools import from here.
"""
