#!/usr/bin/env python3
"""Send a single stimulus to a Pavlok from the command line.

Credential sourcing:
- ``--token`` if given
- otherwise ``PAVLOK_ACCESS_TOKEN``

Examples::

    send_stimulus.py beep 2 --reason "stand up"
    send_stimulus.py vibration 120 --debug
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pypavlok import BlockingPavlokClient, PavlokConfig, PavlokError, Stimulus  # noqa: E402


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send one stimulus through the Pavlok API")
    parser.add_argument(
        "stimulus",
        choices=[member.value for member in Stimulus],
        help="Stimulus to send.",
    )
    parser.add_argument(
        "intensity",
        type=int,
        help="Intensity (shock/vibration: 1-255, beep/led: 1-4).",
    )
    parser.add_argument(
        "--reason",
        default="",
        help="Free-text reason attached to the stimulus.",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Access token. Defaults to PAVLOK_ACCESS_TOKEN.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable DEBUG logging (the access token is redacted).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    overrides = {"access_token": args.token} if args.token else {}
    try:
        config = PavlokConfig.from_env(**overrides)
        with BlockingPavlokClient(config.access_token) as client:
            response = client.send(args.stimulus, args.intensity, args.reason)
    except PavlokError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(response.model_dump(exclude={"raw"}), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
