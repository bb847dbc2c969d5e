import os
import argparse
import logging

from app_factory import create_app
from explorer.listing import DEFAULT_MAX_READ_BYTES


def main():
    parser = argparse.ArgumentParser(description="File Explorer Web Server")

    parser.add_argument(
        "--port", type=int, default=3000, help="Port to run the server on"
    )
    parser.add_argument(
        "--host", type=str, default="0.0.0.0", help="Host to run the server on"
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Directory to browse (defaults to the current directory)",
    )
    parser.add_argument(
        "--max-read-bytes",
        type=int,
        default=DEFAULT_MAX_READ_BYTES,
        help="Largest file shown in the editor; bigger files show as binary",
    )
    parser.add_argument(
        "--allow-outside-root",
        action="store_true",
        help="Allow paths such as ../ to leave the root directory",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Run Flask in debug mode"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = os.path.abspath(args.root or os.getcwd())
    if not os.path.isdir(root):
        print(f"Error: root directory {root} does not exist")
        return 1

    config = {
        "FILES_ROOT": root,
        "CONFINE_TO_ROOT": not args.allow_outside_root,
        "MAX_READ_BYTES": args.max_read_bytes,
    }

    print(f"\n=== File Explorer ===")
    print(f"Starting server on http://{args.host}:{args.port}")
    print(f"Root directory: {root}")
    if args.allow_outside_root:
        print("Warning: paths outside the root directory are reachable")

    app = create_app(config)
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
