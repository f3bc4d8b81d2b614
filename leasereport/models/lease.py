from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LeaseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str = Field(..., min_length=1)  # ключ записи в хранилище
    hardware_identifier: str = ""
    circuit_identifier: str = ""  # option 82, есть не у всех записей
    binding_state: str = ""  # active / free / expired / ... — как пишет сервер
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None  # None для "ends never"
    parse_errors: List[str] = Field(default_factory=list)

    def is_valid(self) -> bool:
        return bool(self.address) and not self.parse_errors

    def is_active(self, now: Optional[datetime] = None) -> bool:
        if self.ends_at is None:
            return True
        if now is None:
            now = datetime.now(timezone.utc)
        return now < self.ends_at

    def row(self) -> Tuple[str, str, str, str, str, str]:
        return (
            self.address,
            self.hardware_identifier,
            self.circuit_identifier,
            self.binding_state,
            format_lease_time(self.starts_at),
            format_lease_time(self.ends_at),
        )


def format_lease_time(value: Optional[datetime]) -> str:
    return value.isoformat(sep=" ") if value else ""
