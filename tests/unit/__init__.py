"""Unit tests for individual components in isolation.

Coverage:
    - client/store: History, draft and view state invariants
    - client/transport: Wire format and error mapping
    - client/controller: Exchanges, error channel and ordering
    - client/viewport: Bottom detection
    - config: Environment loading and validation

Uses httpx MockTransport and unittest.mock for the network boundary.
"""
