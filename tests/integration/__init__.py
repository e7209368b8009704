"""Integration tests for components working together as a system.

No mocks - the transport client talks to the real echo server app over
httpx ASGITransport, and the echo server is exercised through HTTP.
"""
