from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from console.serializers import serialize_board
from console.session import ConsoleSession


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers moves on a console board.")
	parser.add_argument("--json", action="store_true", help="Print the opening position as JSON and exit.")
	parser.add_argument("--log-level", default="WARNING", help="Loguru log level written to stderr.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logger.remove()
	logger.add(sys.stderr, level=args.log_level.upper())

	session = ConsoleSession()
	if args.json:
		print(json.dumps(serialize_board(session.board), indent=2))
		return

	played = session.run(sys.stdin, sys.stdout)
	logger.info("Session ended after {} moves", played)


if __name__ == "__main__":
	main()
