import argparse
import logging
import sys

from gpdesk.config import get_settings
from gpdesk.pipeline import MessagePipeline
from gpdesk.schemas import InboundMessage
from gpdesk.transport import PrintSink, dispatch_message


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Answer GP issue reports against the reference table")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reply_parser = subparsers.add_parser("reply", help="process one message and print the reply")
    reply_parser.add_argument("--message", required=False, help="Message text; read from stdin when omitted")
    reply_parser.add_argument("--sender", default="cli", help="Sender address recorded in logs")

    serve_parser = subparsers.add_parser("serve", help="start the webhook and liveness server")
    serve_parser.add_argument("--host", required=False, help="Bind address (defaults to HOST)")
    serve_parser.add_argument("--port", type=int, required=False, help="Bind port (defaults to PORT)")

    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        from gpdesk.server import create_app

        uvicorn.run(create_app(settings), host=args.host or settings.host, port=args.port or settings.port)
        return

    text = args.message if args.message is not None else sys.stdin.read()
    pipeline = MessagePipeline.from_settings(settings)
    dispatch_message(pipeline, PrintSink(), InboundMessage(sender=args.sender, body=text))


if __name__ == "__main__":
    main()
