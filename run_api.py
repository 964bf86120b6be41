"""
Server entry point for the YouTube insights tool server.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from yt_insights.config import config
from yt_insights.utils.logger import logging


def main():
    """Run the tool server over HTTP or stdio."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    parser = argparse.ArgumentParser(description="YouTube Insights tool server")
    parser.add_argument("--mode", choices=["http", "stdio"], default=config.SERVER_MODE,
                        help="Transport to serve the tools on")
    parser.add_argument("--host", default=config.SERVER_HOST, help="Host to bind the HTTP server to")
    parser.add_argument("--port", type=int, default=config.SERVER_PORT, help="Port to bind the HTTP server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    config.initialize()
    logging.info(f"Settings: {config.get_settings()}")

    if args.mode == "stdio":
        from yt_insights.mcp_server import run_stdio

        logging.info(f"{config.APP_NAME} v{config.APP_VERSION} running on stdio")
        run_stdio()
        return

    # Print startup info
    logging.info(f"Starting {config.APP_NAME} API server v{config.APP_VERSION}")
    logging.info(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    logging.info(f"Binding to: {args.host}:{args.port}")
    logging.info(f"MCP clients connect at http://{args.host}:{args.port}{config.SSE_PATH}")

    # Run the server
    uvicorn.run(
        "yt_insights.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
