"""
Macro configuration.

Settings are plain dataclasses with JSON (de)serialization. Command line
flags override values loaded from a config file.

Example config file:

    {
        "target_path": "D:/Projects/large_model.SLDPRT",
        "keep_count": 3000,
        "visible": true,
        "save_retry": {"max_attempts": null, "delay": 10.0, "backoff": 1.0},
        "plane_names": {"front": "Front Plane", "top": "Top Plane", "right": "Right Plane"}
    }
"""

from dataclasses import dataclass, field, fields
import json
import os
from pathlib import Path

from .retry import RetryPolicy

DEFAULT_KEEP_COUNT = 3000


@dataclass(frozen=True)
class PlaneNames:
    """Names of the three default reference planes, which depend on the UI language."""
    front: str = "Front Plane"
    top: str = "Top Plane"
    right: str = "Right Plane"

    def resolve(self, key: str) -> str:
        """
        Map a plane alias to the document's plane name.

        Accepts "XY"/"Front", "XZ"/"Top", "YZ"/"Right" (any case); anything
        else is returned unchanged as a literal plane name.
        """
        aliases = {
            "xy": self.front, "front": self.front,
            "xz": self.top, "top": self.top,
            "yz": self.right, "right": self.right,
        }
        return aliases.get(key.lower(), key)

    @classmethod
    def chinese(cls) -> "PlaneNames":
        return cls(front="前视基准面", top="上视基准面", right="右视基准面")

    def to_dict(self) -> dict:
        return {"front": self.front, "top": self.top, "right": self.right}

    @classmethod
    def from_dict(cls, d: dict) -> "PlaneNames":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})


@dataclass
class MacroConfig:
    """Settings shared by all macros."""
    target_path: str | None = None
    keep_count: int = DEFAULT_KEEP_COUNT
    visible: bool = True
    save_retry: RetryPolicy = field(default_factory=RetryPolicy.forever)
    plane_names: PlaneNames = field(default_factory=PlaneNames)

    def __post_init__(self):
        if self.keep_count < 0:
            raise ValueError(f"keep_count must be >= 0, got {self.keep_count}")

    def to_dict(self) -> dict:
        return {
            "target_path": self.target_path,
            "keep_count": self.keep_count,
            "visible": self.visible,
            "save_retry": self.save_retry.to_dict(),
            "plane_names": self.plane_names.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "MacroConfig":
        config = cls(
            target_path=d.get("target_path"),
            keep_count=int(d.get("keep_count", DEFAULT_KEEP_COUNT)),
            visible=bool(d.get("visible", True)),
        )
        if "save_retry" in d:
            config.save_retry = RetryPolicy.from_dict(d["save_retry"])
        if "plane_names" in d:
            config.plane_names = PlaneNames.from_dict(d["plane_names"])
        return config


def load_config(path: str | os.PathLike) -> MacroConfig:
    """Load a MacroConfig from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return MacroConfig.from_dict(json.load(f))


def save_config(config: MacroConfig, path: str | os.PathLike) -> None:
    """Write a MacroConfig to a JSON file."""
    Path(path).write_text(json.dumps(config.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
