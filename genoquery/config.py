"""
Run configuration for genoquery.

Defaults reproduce the fixed file names of the classic batch run; any
of them can be overridden from a YAML file or the command line.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CATALOG = "sequences.2.txt"
DEFAULT_COMMANDS = "commands.2.txt"
DEFAULT_REPORT = "genedata.txt"
DEFAULT_RUN_LABEL = "Trosko German"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RunConfig:
    """
    Settings for one batch run.

    Attributes:
        catalog_path: Protein catalog file
        commands_path: Command file
        report_path: Report output file
        run_label: First line of the report
        encoding: Text encoding for all three files
        log_level: Logging level name
        log_file: Optional file that also receives log records
    """

    catalog_path: str = DEFAULT_CATALOG
    commands_path: str = DEFAULT_COMMANDS
    report_path: str = DEFAULT_REPORT
    run_label: str = DEFAULT_RUN_LABEL
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """Create from dictionary representation, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "RunConfig":
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or not a mapping
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file {file_path} must hold a mapping, "
                f"got {type(data).__name__}"
            )

        return cls.from_dict(data)

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        with open(file_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def merged(self, overrides: Dict[str, Any]) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return RunConfig.from_dict(data)
