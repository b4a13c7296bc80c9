from __future__ import annotations

import json
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ChannelRule:
    pattern: re.Pattern[str]
    channel: str

    @classmethod
    def compile(cls, pattern: str, channel: str) -> ChannelRule:
        return cls(pattern=re.compile(pattern, re.IGNORECASE), channel=channel)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


# Order is significant: the first matching rule wins. "Hockeyallsvenskan"
# also matches the Allsvenskan rule and gets Discovery+ as a result.
DEFAULT_CHANNEL_RULES: tuple[ChannelRule, ...] = (
    ChannelRule.compile(r"allsvenskan", "Discovery+"),
    ChannelRule.compile(r"premier league", "Viaplay / Viasat"),
    ChannelRule.compile(r"champions league", "Viaplay / V Sport Fotboll"),
    ChannelRule.compile(r"\bshl\b", "TV4"),
    ChannelRule.compile(r"hockeyallsvenskan", "TV4"),
    ChannelRule.compile(r"\bf1\b|\bformula 1\b", "Viaplay / Viasat"),
    ChannelRule.compile(r"indycar", "Viaplay / Viasat"),
    ChannelRule.compile(r"dart", "Viaplay / Viasat"),
    ChannelRule.compile(r"fotbolls[- ]?vm|fifa world cup|vm", "Viaplay"),
    ChannelRule.compile(r"efl cup|league cup", "Viaplay"),
)


class ChannelResolver:
    """Maps competition/team text to a broadcast channel label, first match wins."""

    def __init__(self, rules: Iterable[ChannelRule] = DEFAULT_CHANNEL_RULES) -> None:
        self._rules: tuple[ChannelRule, ...] = tuple(rules)

    @property
    def rules(self) -> Sequence[ChannelRule]:
        return self._rules

    def resolve(self, competition: str, text: str = "") -> str:
        combined = f"{competition} {text}".lower()
        for rule in self._rules:
            if rule.matches(combined):
                return rule.channel
        return ""

    @classmethod
    def from_json_file(cls, path: Path) -> ChannelResolver:
        """
        Load rules from a JSON list of {"pattern": ..., "channel": ...} objects.

        Rules are used in file order.
        """
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list of channel rules in {path}")

        rules: list[ChannelRule] = []
        for i, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise ValueError(f"Channel rule #{i} in {path} is not an object")
            pattern = entry.get("pattern")
            channel = entry.get("channel")
            if not isinstance(pattern, str) or not isinstance(channel, str):
                raise ValueError(f"Channel rule #{i} in {path} needs string 'pattern' and 'channel'")
            rules.append(ChannelRule.compile(pattern, channel))
        return cls(rules)
