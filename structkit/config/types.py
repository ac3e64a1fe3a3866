import logging
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class LoggerConfig(BaseModel):
    file_path: str = Field(
        default="", description="Logger File Path, empty logs to stderr"
    )
    verbosity: str = Field(..., description="Logger Verbosity")

    @field_validator("verbosity")
    @classmethod
    def check_verbosity(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level


class BaselineConfig(BaseModel):
    columns: str = Field(..., description="Column letters of the baseline grid")
    rows: int = Field(..., ge=0, description="Rows per column of the baseline grid")

    @field_validator("columns")
    @classmethod
    def check_columns(cls, value: str) -> str:
        if value and not (value.isascii() and value.isalpha()):
            raise ValueError(f"Columns must be ASCII letters, got {value!r}")
        return value.upper()


class RegistryConfig(BaseModel):
    share_baseline: bool = Field(
        default=True,
        description="Share one baseline across every cache the registry creates",
    )


class DemosConfig(BaseModel):
    modules: Dict[str, str] = Field(
        ..., description="Demo name -> import path of a module exposing run()"
    )


def parse_config(
    json_dict: Dict[str, Any],
) -> tuple[LoggerConfig, BaselineConfig, RegistryConfig, DemosConfig]:
    try:
        logger_cfg = LoggerConfig(**json_dict["logger"])
        baseline_cfg = BaselineConfig(**json_dict["baseline"])
        registry_cfg = RegistryConfig(**json_dict.get("registry", {}))
        demos_cfg = DemosConfig(**json_dict["demos"])
        return logger_cfg, baseline_cfg, registry_cfg, demos_cfg
    except KeyError as e:
        raise ValueError(f"Missing required config section: {e}")
