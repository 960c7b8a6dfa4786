"""
Configuration for the BVH parser and the inspector CLI.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal

import yaml


@dataclass
class ParserConfig:
    """Parser configuration."""

    # Text decoding; utf-8-sig also accepts a leading BOM
    encoding: str = "utf-8-sig"

    # Require OFFSET lines to be "OFFSET x y z" and keep the values
    validate_offsets: bool = True

    # Sample storage type
    dtype: Literal["float32", "float64"] = "float32"

    skip_blank_lines: bool = True

    def validate(self) -> List[str]:
        """Return a list of configuration problems."""
        issues = []

        if self.dtype not in ("float32", "float64"):
            issues.append(f"Unsupported dtype: {self.dtype}")

        try:
            "".encode(self.encoding)
        except LookupError:
            issues.append(f"Unknown encoding: {self.encoding}")

        return issues


@dataclass
class AppConfig:
    """Inspector application configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        if "log_level" in data:
            config.log_level = str(data["log_level"]).upper()
        if "parser" in data:
            parser = data["parser"] or {}
            unknown = set(parser) - set(ParserConfig.__dataclass_fields__)
            if unknown:
                raise ValueError(f"Unknown parser options: {sorted(unknown)}")
            config.parser = ParserConfig(**parser)

        return config

    def to_yaml(self, path: Path) -> None:
        """Save configuration to YAML file."""

        def to_dict(obj):
            if hasattr(obj, "__dataclass_fields__"):
                return {k: to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Path):
                return str(obj)
            return obj

        data = to_dict(self)

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        issues = self.parser.validate()
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            issues.append(f"Unknown log level: {self.log_level}")
        return issues
