from typing import Dict
from pathlib import Path
from datetime import datetime, timezone
import json

def save_parsed(parsed_data: Dict, identifier: str, output_dir: str = "data/parsed/leases") -> Path:
    """
    Сохраняет нормализованные leases в JSON.
    Имя файла: <identifier>_<время UTC>_leases.json
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H-%M-%S")

    base_path = Path(output_dir)
    base_path.mkdir(parents=True, exist_ok=True)

    filename = base_path / f"{identifier}_{timestamp}_leases.json"

    with open(filename, "w", encoding="utf-8") as f:
        json.dump(parsed_data, f, ensure_ascii=False, indent=2)

    return filename


def sanitize_filename(s: str) -> str:
    return "".join(c if c.isalnum() or c in ('-', '_') else '_' for c in s)
