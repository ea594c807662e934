#!/usr/bin/env python3
"""
Split chat messages into IRC PRIVMSG payloads.

IRC servers cap a protocol line at 512 bytes including the command prefix,
so bridges usually keep the text part well below that. This example splits
each message line on a 400-byte budget, keeps emoji sequences intact and
drops the trailing spaces each part would otherwise carry.

Usage:
    python examples/irc_message_parts.py
    python examples/irc_message_parts.py --limit 40 --verbose
"""

import argparse
import logging

from bytewrap import ByteWrapper, SplitConfig, Trace

MESSAGE = (
    "Hello from the bridge \U0001f44b\U0001f3fd! This line is long enough that "
    "it has to be cut into several protocol messages, and the family emoji "
    "\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467 must never be torn "
    "in half.\r\nSecond line."
)


def message_parts(wrapper: ByteWrapper, content: str):
    lines = content.replace("\r", "\n").split("\n")
    for line in lines:
        for part in wrapper.iter_lines(line):
            if part.text:
                yield part


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--limit", type=int, default=400)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    wrapper = ByteWrapper(
        SplitConfig(
            byte_limit=args.limit,
            continue_on_error=True,
            trim_trailing_whitespace=True,
        )
    )
    for part in message_parts(wrapper, MESSAGE):
        flag = "" if part.ok else "  [oversized]"
        print(f"PRIVMSG #bridge :{part.text}  ({part.byte_length} bytes){flag}")

    trace = Trace()
    list(wrapper.iter_lines(MESSAGE, trace=trace))
    print("Break decisions:", ", ".join(trace.kinds()))


if __name__ == "__main__":
    main()
