from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, List, TextIO

from . import __version__, config
from .errors import MissingInputError, TermQRError
from .models import RenderConfig
from .qrencode import Encoder, SegnoEncoder
from .render import render_to_terminal
from .terminal import is_interactive, resolve_size

EXAMPLES = """\
examples:
  termqr -text "Hello, World!"
  termqr -t "https://example.com" -s 5
  termqr -t "Save to file" -o qr.png
  echo "Pipe input" | termqr -t -
"""


def read_stdin_text(stream: BinaryIO | None = None) -> str:
    """Read the whole stream, close it, and strip surrounding whitespace.

    The bytes are decoded as UTF-8; invalid sequences become U+FFFD rather
    than failing, so the encoded symbol carries the replacement character.
    """
    src = stream if stream is not None else sys.stdin.buffer
    buf = bytearray()
    with src:
        for chunk in iter(lambda: src.read(config.READ_BUF), b""):
            buf.extend(chunk)
    return buf.decode("utf-8", errors="replace").strip()


def resolve_text(text: str | None, stream: BinaryIO | None = None) -> str:
    if text == "-":
        text = read_stdin_text(stream)
    if not text or not text.strip():
        raise MissingInputError("text to encode is required")
    return text


def generate(
    cfg: RenderConfig,
    encoder: Encoder,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if cfg.file_mode:
        encoder.write_raster(
            cfg.text,
            config.DEFAULT_PIXELS_PER_MODULE,
            cfg.output,
            include_border=cfg.border > 0,
        )
        if not cfg.quiet:
            print(f"[qr] wrote {cfg.output}", file=err)
        return

    grid = encoder.encode(cfg.text)
    size = resolve_size(cfg.size, out)
    interactive = is_interactive(out)

    show_banner = interactive and not cfg.quiet
    if show_banner:
        print(f"QR Code for: {cfg.text}", file=out)
        print(file=out)
    render_to_terminal(grid, interactive, size, cfg.border, out=out)
    if show_banner:
        print(file=out)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termqr",
        description="Generate QR codes in the terminal or save to file.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-t", "-text", "--text", default="", help="Text to encode ('-' reads stdin)")
    parser.add_argument(
        "-s",
        "-size",
        "--size",
        type=int,
        default=0,
        help="Size scale 1-10 (0 for auto-detect, 1=smallest, 10=largest)",
    )
    parser.add_argument("-o", "-output", "--output", default="", help="Save an image to this path instead of printing")
    parser.add_argument("-q", "-quiet", "--quiet", action="store_true", help="Suppress extra output")
    parser.add_argument(
        "-b",
        "-border",
        "--border",
        type=int,
        default=config.DEFAULT_BORDER,
        help=f"Border size around QR code (default: {config.DEFAULT_BORDER}, <=0 disables)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: List[str] | None = None, encoder: Encoder | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        text = resolve_text(args.text)
        cfg = RenderConfig.from_args(args, text=text)
        generate(cfg, encoder if encoder is not None else SegnoEncoder())
    except MissingInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    except TermQRError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
