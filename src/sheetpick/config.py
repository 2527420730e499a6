"""Configuration management for SheetPick."""
import os
from pathlib import Path
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

try:
    import tomli
except ImportError:
    import tomllib as tomli


PASSWORD_ENV_VAR = "SHEETPICK_DECRYPT_PASSWORD"


class GeneralConfig(BaseModel):
    log_level: str = "INFO"


class DecryptConfig(BaseModel):
    # Shared secret the settlement workbooks are protected with
    password: str = "1234"


class SummaryConfig(BaseModel):
    sheet_name: str = "정산서"
    row_labels: list[str] = Field(default_factory=lambda: ["24행", "25행"], min_length=2, max_length=2)
    total_label: str = "전체 합계"


class PreviewConfig(BaseModel):
    row_limit: int = 20


class ExportConfig(BaseModel):
    sheet_title: str = "Extracted Data"
    filename: str = "extracted_data.xlsx"


class APIConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    max_upload_mb: int = 50


class Config(BaseSettings):
    general: GeneralConfig = Field(default_factory=GeneralConfig)
    decrypt: DecryptConfig = Field(default_factory=DecryptConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load config from TOML file or use defaults."""
        if config_path is None:
            config_path = Path.home() / ".config" / "sheetpick" / "config.toml"

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomli.load(f)
            config = cls(**data)
        else:
            config = cls()

        password = os.environ.get(PASSWORD_ENV_VAR)
        if password:
            config.decrypt.password = password
        return config

    def get_password(self) -> str:
        """Get the password used for the fallback decryption attempt."""
        return self.decrypt.password


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config) -> None:
    """Set the global config instance."""
    global _config
    _config = config
