import json
from pathlib import Path


def write_catalog(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=4), encoding="utf-8")


def read_catalog(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))
