#!/usr/bin/env python3
"""Server startup script"""

import uvicorn
import logging
import socket
import sys

from config import settings, validate_settings

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

def check_dependencies():
    """Check if required packages are installed"""
    required = ['fastapi', 'starlette', 'pydantic']

    missing = []
    for package in required:
        try:
            __import__(package)
        except ImportError:
            missing.append(package)

    if missing:
        logger.error(f"Missing packages: {missing}")
        return False
    return True

def bind_listener(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front; failing to bind is fatal"""
    sock = socket.socket(socket.AF_INET6 if ":" in host else socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        logger.error(f"Cannot bind {host}:{port}: {e}")
        sys.exit(1)
    sock.set_inheritable(True)
    return sock

def main():
    """Start the server"""
    if not check_dependencies():
        sys.exit(1)

    try:
        validate_settings(settings)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    sock = bind_listener(settings.host, settings.port)
    logger.info(f"Server running on http://localhost:{settings.port}")

    config = uvicorn.Config("main:app", log_level=settings.log_level, reload=False)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error(f"Server failed: {e}")
        sys.exit(1)
    finally:
        sock.close()

if __name__ == "__main__":
    main()
