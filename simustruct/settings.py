from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simustruct.models import LedgerMode

DEFAULT_LOG_FILE = Path("simustruct.log")
DEFAULT_TEST_LOG_FILE = Path("simustruct_test.log")


class AppSettings(BaseSettings):
    test: bool = Field(default=False)
    debug: bool = Field(default=False)

    ledger_mode: LedgerMode = LedgerMode.PARITY
    log_file: Path = DEFAULT_LOG_FILE

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="SIMUSTRUCT_")

    @property
    def log_filename(self) -> Path:
        if self.test and self.log_file == DEFAULT_LOG_FILE:
            return DEFAULT_TEST_LOG_FILE

        return self.log_file


def get_settings() -> AppSettings:
    return AppSettings()
