from __future__ import annotations

from dataclasses import dataclass

from localcoin.config import Settings


@dataclass
class PageContext:
    settings: Settings
