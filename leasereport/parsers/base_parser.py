from datetime import tzinfo
from typing import IO

from leasereport.storage.lease_store import LeaseStore


class BaseParser:
    @classmethod
    def parse(cls, stream: IO[bytes], store: LeaseStore, tz: tzinfo, chunk_size: int = 4096) -> LeaseStore:
        raise NotImplementedError("Реализуйте метод parse в наследнике")
