import os
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from leasereport.errors import ConfigError

CONFIG_FILE = Path("config/leasereport.yaml")

# переменная окружения -> поле настроек
ENV_OVERRIDES = {
    "LEASE_FILE": "lease_file",
    "LEASE_TIMEZONE": "timezone",
    "LEASE_FORMAT": "format",
    "LEASEREPORT_LOG_LEVEL": "log_level",
}


class ReportSettings(BaseModel):
    lease_file: str = "leases-snapshot.txt"
    timezone: str = "UTC"  # в dhcpd.leases зона не записана
    format: str = "isc_dhcpd"
    chunk_size: int = Field(4096, gt=0)
    json_output_dir: Optional[str] = None  # если задано — сохраняем ещё и JSON
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Неизвестная временная зона: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Неизвестный уровень логирования: {value}")
        return value

    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Не удалось разобрать {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: ожидается словарь настроек")

    section = data.get("leasereport", data)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: секция leasereport должна быть словарём")
    return dict(section)


def load_settings(path: Optional[Path] = None) -> ReportSettings:
    """
    Настройки из YAML-файла, поверх них — переменные окружения (и .env).
    Путь к YAML можно переопределить через LEASEREPORT_CONFIG.
    """
    load_dotenv()

    if path is None:
        path = Path(os.getenv("LEASEREPORT_CONFIG", CONFIG_FILE))

    data = load_config_file(path)

    for env_name, field in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field] = value

    try:
        return ReportSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Неверная конфигурация: {e}") from e
