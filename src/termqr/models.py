from __future__ import annotations

import argparse
import dataclasses
from typing import Optional

from . import config


@dataclasses.dataclass(frozen=True)
class RenderConfig:
    text: str
    size: int = 0  # 0 or anything outside 1-10 means auto
    output: Optional[str] = None
    quiet: bool = False
    border: int = config.DEFAULT_BORDER

    @property
    def file_mode(self) -> bool:
        return bool(self.output)

    @classmethod
    def from_args(cls, args: argparse.Namespace, text: str | None = None) -> "RenderConfig":
        return cls(
            text=args.text if text is None else text,
            size=int(args.size),
            output=args.output or None,
            quiet=bool(args.quiet),
            border=int(args.border),
        )
