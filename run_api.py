"""
Entry point for the Folio preview server.

Usage:
    python run_api.py                    # Development (auto-reload)
    python run_api.py --production       # Production mode
    python run_api.py --config my.json   # Use a specific gallery config

Or directly with uvicorn:
    uvicorn api:create_app --factory --reload --port 5000
"""

import os
import sys
import argparse

# Ensure the script's directory is in Python path for local imports
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)


def main():
    parser = argparse.ArgumentParser(description='Folio Preview Server')
    parser.add_argument('--port', type=int, default=int(os.environ.get('PORT', 5000)),
                        help='Port to listen on (default: 5000)')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--config', default=None, help='Path to gallery_config.json')
    parser.add_argument('--production', action='store_true', help='Run in production mode')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers (production)')
    args = parser.parse_args()

    if args.config:
        # create_app runs in the uvicorn process, so pass the path through the environment
        from api.config import CONFIG_ENV_VAR
        os.environ[CONFIG_ENV_VAR] = os.path.abspath(args.config)

    import uvicorn

    if args.production:
        uvicorn.run(
            "api:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            workers=args.workers,
        )
    else:
        uvicorn.run(
            "api:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=True,
            reload_dirs=[_script_dir],
        )


if __name__ == '__main__':
    main()
