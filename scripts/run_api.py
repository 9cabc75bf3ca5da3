#!/usr/bin/env python3
"""
SympTrack — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --config config.yaml --reload
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='SympTrack API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=int(os.getenv('PORT', '5000')), help='Port (default: $PORT or 5000)')
    parser.add_argument('--config', default=None, help='YAML config overlay (SYMPTRACK_CONFIG)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')

    args = parser.parse_args()

    if args.config:
        os.environ['SYMPTRACK_CONFIG'] = args.config

    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    print("=" * 60)
    print("🩺 SympTrack — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    import uvicorn

    # Запускаємо сервер
    uvicorn.run(
        "symptrack.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
