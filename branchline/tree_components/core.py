from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Union


class GuidePart(Enum):

    CONTINUE = "continue"
    FORK = "fork"
    END = "end"
    SPACE = "space"


OverrideKey = Union[GuidePart, str]


def _coerce_part(key: OverrideKey) -> GuidePart:
    if isinstance(key, GuidePart):
        return key
    if isinstance(key, str):
        try:
            return GuidePart[key.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown guide part: {key!r}")


@dataclass(frozen=True)
class GuideSet:
    """Glyph table for the four guide parts.

    ``safe`` names the table used when the output cannot carry Unicode;
    ``None`` means the table is already ASCII-safe.
    """

    name: str = "line"
    space: str = "    "
    continue_: str = "│   "
    fork: str = "├── "
    end: str = "└── "
    safe: Optional[str] = "ascii"
    overrides: Mapping[GuidePart, str] = field(default_factory=dict)

    @classmethod
    def for_style(
        cls,
        style: str,
        overrides: Optional[Mapping[OverrideKey, str]] = None,
    ) -> "GuideSet":
        key = style.lower().strip()
        if key in {"line", "square", "default"}:
            guide = cls()
        elif key in {"ascii", "plain", "safe"}:
            guide = cls(
                name="ascii",
                space="    ",
                continue_="|   ",
                fork="|-- ",
                end="`-- ",
                safe=None,
            )
        elif key in {"double", "doubleline", "double_line"}:
            guide = cls(
                name="double",
                space="    ",
                continue_="║   ",
                fork="╠══ ",
                end="╚══ ",
            )
        elif key in {"bold", "heavy", "boldline", "bold_line"}:
            guide = cls(
                name="bold",
                space="    ",
                continue_="┃   ",
                fork="┣━━ ",
                end="┗━━ ",
            )
        else:
            raise ValueError(f"Unknown guide style: {style}")
        if overrides:
            guide = guide.with_overrides(overrides)
        return guide

    def with_overrides(self, overrides: Mapping[OverrideKey, str]) -> "GuideSet":
        merged: Dict[GuidePart, str] = dict(self.overrides)
        for key, text in overrides.items():
            if not isinstance(text, str):
                raise ValueError(f"Guide override for {key!r} must be a string.")
            merged[_coerce_part(key)] = text
        return replace(self, overrides=merged)

    def safe_variant(self) -> "GuideSet":
        kept = {part: text for part, text in self.overrides.items() if text.isascii()}
        if self.safe is None:
            return self if len(kept) == len(self.overrides) else replace(self, overrides=kept)
        base = GuideSet.for_style(self.safe)
        return replace(base, overrides=kept) if kept else base

    def get_part(self, part: GuidePart) -> str:
        override = self.overrides.get(part)
        if override is not None:
            return override
        if part is GuidePart.CONTINUE:
            return self.continue_
        if part is GuidePart.FORK:
            return self.fork
        if part is GuidePart.END:
            return self.end
        return self.space

    def resolve(self, part: GuidePart, safe: bool = False) -> str:
        guide = self.safe_variant() if safe else self
        return guide.get_part(part)
