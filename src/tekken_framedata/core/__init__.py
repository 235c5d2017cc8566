"""Core business logic — frame parsing, scoring, filtering, caching and the API client.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework.
"""
