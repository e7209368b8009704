"""Test package for TalkNative.

Structure:
    - unit/: Store, transport, controller, viewport and config in isolation
    - integration/: Client and echo server talking over in-process HTTP

Network access is never required. HTTP goes through httpx MockTransport or
ASGITransport. Leverages pytest with pytest-check for soft assertions.
"""
