import csv
import logging
import sys
from pathlib import Path
from typing import Mapping, TextIO

from leasereport.config import load_settings
from leasereport.errors import ConfigError
from leasereport.models.lease import LeaseRecord
from leasereport.normalizer.lease import REPORT_HEADER, LeaseNormalizer
from leasereport.parsers import get_parser
from leasereport.storage.file import sanitize_filename, save_parsed
from leasereport.storage.lease_store import LeaseStore

logger = logging.getLogger(__name__)


def write_csv(leases: Mapping[str, LeaseRecord], out: TextIO) -> int:
    rows = LeaseNormalizer.normalize(leases)["leases_normalized"]

    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    for row in rows:
        writer.writerow([row["ip"], row["mac"], row["circuit_id"],
                         row["binding_state"], row["starts"], row["ends"]])
    return len(rows)


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = get_parser(settings.format)
    if parser is None:
        print(f"Нет парсера для формата {settings.format!r}", file=sys.stderr)
        return 2

    try:
        with open(settings.lease_file, "rb") as f:
            store = parser(f, LeaseStore(), settings.tzinfo(), settings.chunk_size)
    except OSError as e:
        print(f"Не удалось прочитать {settings.lease_file}: {e}", file=sys.stderr)
        return 1

    count = write_csv(store.all(), sys.stdout)
    logger.info("В отчёт попало записей: %d", count)

    if settings.json_output_dir:
        identifier = sanitize_filename(Path(settings.lease_file).stem)
        path = save_parsed(LeaseNormalizer.normalize(store.all()), identifier, settings.json_output_dir)
        logger.info("Сохранён JSON: %s", path)

    return 0


def run():
    sys.exit(main())
