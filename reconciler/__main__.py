"""
Run the webhook service.

    python -m reconciler
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "reconciler.app:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("ENV", "development") == "development",
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
