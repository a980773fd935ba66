"""
Run the Civica API locally with auto-reload.

Responsibility: Development server entry point
"""

import argparse
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Civica API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")))
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    print("🚀 Starting Civica API Server...")
    print(f"📍 API will be available at: http://localhost:{args.port}")
    print(f"📚 Swagger docs at: http://localhost:{args.port}/docs")
    print("\nPress CTRL+C to stop\n")

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level="info"
    )
