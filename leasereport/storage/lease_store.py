from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from leasereport.models.lease import LeaseRecord


class LeaseStore:
    """
    Последняя валидная запись по каждому адресу.
    Сервер пишет продление аренды новой записью в конец файла,
    поэтому более поздняя запись с тем же адресом заменяет раннюю.
    Не потокобезопасно: заполняется одним проходом парсера.
    """

    def __init__(self):
        self._leases: Dict[str, LeaseRecord] = {}

    def commit(self, record: LeaseRecord) -> None:
        if not record.is_valid():
            raise ValueError(f"Запись {record.address!r} с ошибками не сохраняется: {record.parse_errors}")
        self._leases[record.address] = record

    def all(self) -> Mapping[str, LeaseRecord]:
        return MappingProxyType(self._leases)

    def get(self, address: str) -> Optional[LeaseRecord]:
        return self._leases.get(address)

    def __len__(self) -> int:
        return len(self._leases)

    def __iter__(self) -> Iterator[str]:
        return iter(self._leases)

    def __contains__(self, address: object) -> bool:
        return address in self._leases
