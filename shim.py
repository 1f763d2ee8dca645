#!/usr/bin/env python
import argparse
import logging
import sys

from png_frame.errors import FormatError
from png_frame.png_decoder import Services
from png_frame.printer import Printer


def show_pub_locals(locals_):
    for name, var in {**locals_}.items():
        if not name.startswith("_"):
            svar = f"{var}"
            if len(svar) > 80:
                svar = svar[:80] + "..."
            print(f"{name} = {svar}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Decode the signature and IHDR chunk of a PNG file")
    parser.add_argument("fp", type=str, help="Path to the PNG file")
    parser.add_argument("-s", "--strict", action="store_true", help="Reject zero dimensions and bad bit depths")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each decoding step")
    parser.add_argument("--no-colour", action="store_true", help="Plain text output")
    parser.add_argument("--repl", action="store_true", help="Drop into ptpython with the decoded objects")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    services = Services({"fp": args.fp, "strict": args.strict})
    try:
        decoder = services.png_decoder
        ihdr = decoder.decode()
    except FormatError as e:
        print(f"{args.fp}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"{args.fp}: {e}", file=sys.stderr)
        return 2

    Printer(colour=not args.no_colour).print(ihdr)

    if args.repl:
        from ptpython import embed

        chunk = decoder.first_chunk
        show_pub_locals({"decoder": decoder, "chunk": chunk, "ihdr": ihdr})
        embed(globals(), {"decoder": decoder, "chunk": chunk, "ihdr": ihdr})

    return 0


if __name__ == "__main__":
    sys.exit(main())
