"""Parsing, building and querying of robots.txt files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

_WHITESPACE = " \t\n\r"


class DirectiveType(Enum):
    ALLOW = "Allow"
    DISALLOW = "Disallow"


@dataclass
class RobotsTxtRule:
    """One Allow or Disallow line."""

    type: DirectiveType
    path: str


@dataclass
class UserAgentBlock:
    """Rules that apply to a set of user agents."""

    user_agents: Set[str] = field(default_factory=set)
    rules: List[RobotsTxtRule] = field(default_factory=list)
    crawl_delay: str = ""
    host: str = ""


@dataclass
class RobotsTxt:
    """A robots.txt document: user-agent blocks plus sitemap URLs."""

    user_agent_blocks: List[UserAgentBlock] = field(default_factory=list)
    sitemaps: Set[str] = field(default_factory=set)

    @classmethod
    def parse(cls, content: str) -> "RobotsTxt":
        """Parse robots.txt text.

        Every ``User-agent`` line opens a new block; rule lines outside a
        block are ignored, ``Sitemap`` lines are collected anywhere.
        """
        robots = cls()
        current: Optional[UserAgentBlock] = None

        for raw in content.split("\n"):
            line = raw.strip(_WHITESPACE)
            if not line or line.startswith("#"):
                continue
            directive, sep, value = line.partition(":")
            if not sep:
                continue
            directive = directive.strip(_WHITESPACE).lower()
            value = value.strip(_WHITESPACE)

            if directive == "user-agent":
                if current is not None:
                    robots.user_agent_blocks.append(current)
                current = UserAgentBlock()
                current.user_agents.add(value)
            elif directive == "sitemap":
                robots.sitemaps.add(value)
            elif current is None:
                continue
            elif directive == "allow":
                current.rules.append(RobotsTxtRule(DirectiveType.ALLOW, value))
            elif directive == "disallow":
                current.rules.append(RobotsTxtRule(DirectiveType.DISALLOW, value))
            elif directive == "crawl-delay":
                current.crawl_delay = value
            elif directive == "host":
                current.host = value

        if current is not None:
            robots.user_agent_blocks.append(current)
        return robots

    def build(self) -> str:
        """Render the document back to robots.txt text."""
        lines: List[str] = []
        for block in self.user_agent_blocks:
            lines.extend(f"User-agent: {ua}" for ua in sorted(block.user_agents))
            lines.extend(f"{rule.type.value}: {rule.path}" for rule in block.rules)
            if block.crawl_delay:
                lines.append(f"Crawl-delay: {block.crawl_delay}")
            if block.host:
                lines.append(f"Host: {block.host}")
            lines.append("")
        lines.extend(f"Sitemap: {sitemap}" for sitemap in sorted(self.sitemaps))
        return "".join(f"{line}\n" for line in lines)

    def _block_for(self, user_agent: str) -> Optional[UserAgentBlock]:
        best: Optional[UserAgentBlock] = None
        best_score = -1
        for block in self.user_agent_blocks:
            for ua in sorted(block.user_agents):
                if ua == "*" and best_score < 0:
                    best, best_score = block, 0
                elif ua == user_agent:
                    best, best_score = block, 1
                    break
            if best_score == 1:
                break
        return best

    def is_path_allowed(self, user_agent: str, path: str) -> bool:
        """Return whether ``user_agent`` may fetch ``path``.

        An exact user-agent match wins over ``*``; the longest rule whose
        path is a prefix of ``path`` decides. No matching rule means allowed.
        """
        block = self._block_for(user_agent)
        if block is None:
            return True

        for rule in sorted(block.rules, key=lambda r: len(r.path), reverse=True):
            if not path.startswith(rule.path):
                continue
            if rule.path.endswith("$") and path != rule.path[:-1]:
                continue
            return rule.type is DirectiveType.ALLOW
        return True