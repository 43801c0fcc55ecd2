#!/usr/bin/env python3
"""
Dev server for the Scholar Integration API.

    python run_dev.py
    python run_dev.py --port 8080 --no-reload
"""

import argparse


def main():
    parser = argparse.ArgumentParser(description="Scholar Integration API Dev Server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: 8000)")
    parser.add_argument("--reload", action="store_true", default=True, help="Enable auto-reload (default: True)")
    parser.add_argument("--no-reload", dest="reload", action="store_false", help="Disable auto-reload")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"], help="Log level")

    args = parser.parse_args()

    import uvicorn

    print(f"📚 Scholar Integration API on http://{args.host}:{args.port} (docs at /docs)")

    uvicorn.run(
        "main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        reload_dirs=["api", "scientometrics"] if args.reload else None,
    )


if __name__ == "__main__":
    main()
