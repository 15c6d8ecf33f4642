from typing import Literal

from pydantic import BaseModel, Field

StorageBackend = Literal["file", "sqlite", "memory"]


class StorageRules(BaseModel):
    backend: StorageBackend = "file"
    data_dir: str = "./data"
    profile_key: str = "smartlink_data"
    stats_key: str = "smartlink_stats"
    sqlite_filename: str = "smartlink.db"


class LimitsRules(BaseModel):
    max_links: int = Field(default=50, ge=1)


class ExportRules(BaseModel):
    schema_version: str = "1.0.0"
    filename_prefix: str = "smartlink"


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Rules(BaseModel):
    storage: StorageRules = Field(default_factory=StorageRules)
    limits: LimitsRules = Field(default_factory=LimitsRules)
    export: ExportRules = Field(default_factory=ExportRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
