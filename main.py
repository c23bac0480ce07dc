"""Development entrypoint for the hexpath HTTP API."""

from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve hexpath map queries over HTTP")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    args = parser.parse_args()

    uvicorn.run(
        "hexpath.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
