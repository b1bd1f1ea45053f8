from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class OptionSetsConfig(BaseModel):
    directory: List[str] = ["--repo", "--dir", "--dest"]
    unsupported: List[str] = ["--version", "--board", "--workon", "--packages"]
    dut: List[str] = ["--dut"]
    servo: List[str] = ["--serial"]

    @model_validator(mode="after")
    def check_disjoint(self) -> "OptionSetsConfig":
        """Every option name may belong to one set only"""
        seen = {}
        for set_name in ("directory", "unsupported", "dut", "servo"):
            for option in getattr(self, set_name):
                if option in seen and seen[option] != set_name:
                    raise ValueError(
                        f"option '{option}' is listed in both '{seen[option]}' and '{set_name}'"
                    )
                seen[option] = set_name
        return self


class LookupConfig(BaseModel):
    timeout_seconds: Optional[float] = None


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    log_file: Optional[str] = None


class CompletionConfig(BaseModel):
    version: str = "1.0"
    options: OptionSetsConfig = Field(default_factory=OptionSetsConfig)
    lookups: LookupConfig = Field(default_factory=LookupConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
