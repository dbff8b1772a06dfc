"""
API entry point

Usage:
    python -m ledgerbook.api
"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "ledgerbook.api.app:create_app",
        factory=True,
        host=os.environ.get("LEDGERBOOK_HOST", "127.0.0.1"),
        port=int(os.environ.get("LEDGERBOOK_PORT", "3001")),
        reload=False,
    )
