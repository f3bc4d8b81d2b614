import logging
import re
from datetime import datetime, tzinfo
from typing import IO, Any, Dict, List, Mapping, Optional

from leasereport.errors import LeaseTimeError
from leasereport.models.lease import LeaseRecord
from leasereport.parsers.base_parser import BaseParser
from leasereport.parsers.registry import register_parser
from leasereport.parsers.tokenizer import DEFAULT_CHUNK_SIZE, iter_blocks
from leasereport.storage.lease_store import LeaseStore

logger = logging.getLogger(__name__)

LEASE_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"

LEASE_TIME_RE = re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}$")
# starts 2 2023/01/10 08:00:00;
TIME_LINE_RE = re.compile(r"^(?:starts|ends)\s+\d+\s+(.+?)\s*;$")
ENDS_NEVER_RE = re.compile(r"^ends\s+never\s*;$")
# hardware ethernet aa:bb:cc:dd:ee:ff;
HARDWARE_RE = re.compile(r"^hardware\s+\S+\s+([^;\s]+)\s*;")
# option agent.circuit-id "eth0/1/2";
CIRCUIT_ID_RE = re.compile(r"^option\s+agent\.circuit-id\s+(.*?)\s*;+$")
# binding state active;  (но не next/rewind binding state)
BINDING_STATE_RE = re.compile(r"^binding\s+state\s+([^;\s]+)\s*;")


def parse_lease_time(value: str, tz: tzinfo) -> datetime:
    """
    Разбирает время формата dhcpd.leases (YYYY/MM/DD HH:MM:SS) в зоне tz.
    В самом файле зона не записана, её задаёт конфигурация.
    """
    value = value.strip()
    if not LEASE_TIME_RE.match(value):
        raise LeaseTimeError(f"Неверный формат времени: {value!r}")
    try:
        parsed = datetime.strptime(value, LEASE_TIME_FORMAT)
    except ValueError as e:
        raise LeaseTimeError(f"Неверное время {value!r}: {e}") from e
    return parsed.replace(tzinfo=tz)


class IscDhcpdLeasesParser(BaseParser):
    @classmethod
    def parse_entry(cls, text: str, tz: tzinfo) -> Optional[LeaseRecord]:
        """
        Разбирает один блок (текст до закрывающей скобки).
        Возвращает None, если блок не lease (host, group, заголовок файла),
        если у lease пустой адрес или если хотя бы одно поле не разобралось.
        """
        lines = text.splitlines()
        fields: Dict[str, Any] = {}
        errors: List[str] = []
        declared = False

        for line in lines:
            line = line.strip()
            tokens = line.split()
            if not tokens:
                continue

            if not declared:
                # Всё до строки "lease <адрес> {" — комментарии и прочие заголовки
                if tokens[0] == "lease":
                    declared = True
                    if len(tokens) > 1 and tokens[1] != "{":
                        fields["address"] = tokens[1]
                continue

            keyword = tokens[0]

            if keyword in ("starts", "ends"):
                key = "starts_at" if keyword == "starts" else "ends_at"
                if keyword == "ends" and ENDS_NEVER_RE.match(line):
                    fields[key] = None
                    continue
                match = TIME_LINE_RE.match(line)
                try:
                    if not match:
                        raise LeaseTimeError(f"Неверная строка времени: {line!r}")
                    fields[key] = parse_lease_time(match.group(1), tz)
                except LeaseTimeError as e:
                    errors.append(f"{keyword}: {e}")

            elif keyword == "hardware":
                match = HARDWARE_RE.match(line)
                if match:
                    fields["hardware_identifier"] = match.group(1)
                else:
                    logger.debug("Пропущена строка hardware: %r", line)

            elif keyword == "option" and len(tokens) > 1 and tokens[1] == "agent.circuit-id":
                match = CIRCUIT_ID_RE.match(line)
                if match:
                    fields["circuit_identifier"] = match.group(1).strip('"')
                else:
                    logger.debug("Пропущена строка circuit-id: %r", line)

            elif keyword == "binding" and len(tokens) > 1 and tokens[1] == "state":
                match = BINDING_STATE_RE.match(line)
                if match:
                    fields["binding_state"] = match.group(1)
                else:
                    logger.debug("Пропущена строка binding state: %r", line)

        if not declared:
            return None

        address = fields.get("address", "")
        if not address:
            logger.debug("Запись lease без адреса пропущена")
            return None

        record = LeaseRecord(**fields, parse_errors=errors)
        if not record.is_valid():
            logger.debug("Запись %s отброшена: %s", address, "; ".join(record.parse_errors))
            return None

        return record

    @classmethod
    def parse(cls, stream: IO[bytes], store: LeaseStore, tz: tzinfo, chunk_size: int = DEFAULT_CHUNK_SIZE) -> LeaseStore:
        blocks = 0
        committed = 0

        for block in iter_blocks(stream, chunk_size):
            blocks += 1
            record = cls.parse_entry(block.decode("utf-8", errors="replace"), tz)
            if record is None:
                continue
            store.commit(record)
            committed += 1

        logger.info("Разобрано блоков: %d, записей lease: %d, уникальных адресов: %d",
                    blocks, committed, len(store))
        return store


class LeaseFile:
    """Один проход по снимку dhcpd.leases со своим хранилищем."""

    def __init__(self, stream: IO[bytes], tz: tzinfo, store: Optional[LeaseStore] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.stream = stream
        self.tz = tz
        self.store = store if store is not None else LeaseStore()
        self.chunk_size = chunk_size

    def parse(self) -> LeaseStore:
        return IscDhcpdLeasesParser.parse(self.stream, self.store, self.tz, self.chunk_size)

    def leases(self) -> Mapping[str, LeaseRecord]:
        return self.store.all()


# Регистрация
register_parser("isc_dhcpd", IscDhcpdLeasesParser.parse)
