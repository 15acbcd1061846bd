#!/usr/bin/env python3
"""
SistemaExperto — Ejecución del servidor API

Ejecución:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --config config.yaml
"""

import os
import sys
import argparse
from pathlib import Path

# Añadimos la raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='SistemaExperto API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--config', default=None, help='YAML con la configuración del sistema')

    args = parser.parse_args()

    print("=" * 60)
    print("🏥 SistemaExperto — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Config: {args.config or 'default'}")
    print("=" * 60)

    if args.config:
        os.environ["SISTEMA_EXPERTO_CONFIG"] = args.config
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)

    import uvicorn

    uvicorn.run(
        "sistema_experto.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
