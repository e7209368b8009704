"""NiceGUI interface - thin display layer for the chat screen.

Responsibilities:
    - Intro banner until the first message is sent
    - Message bubbles styled by sender, system notices for failed exchanges
    - Single-line input bound to the draft text, send button and Enter key
    - Bottom-aware autoscroll and keyboard dismissal on scroll or tap

Contains no conversation logic. Delegates everything to ChatController.
"""
