"""FastAPI application factory for the development echo server.

Middleware and router registration.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from talknative.api.chat import router as chat_router


def create_app() -> FastAPI:
    """Create and configure the echo server application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="TalkNative Echo Server",
        description=(
            "Development stand-in for the TalkNative chat server. "
            "POST /chat/message replies with the message it received."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "talknative-echo"}

    return application


app = create_app()
