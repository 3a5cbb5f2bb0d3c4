from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleboxConfig:
    root_tag: str = "html"  # wraps fragments with several top-level nodes
    user_agent_css: str = ""  # applied before the author stylesheet
