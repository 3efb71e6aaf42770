"""Test suite for the banking client.

- unit/: Unit tests - domain logic in isolation, HTTP mocked with pytest-httpx
"""
