import json
from pathlib import Path


def get_data_filename(filename: str) -> Path:
    data_path = Path(__file__).resolve().parent.parent
    return data_path / "db" / "data" / filename


def get_data_from_json(filename: str):
    file_path = get_data_filename(filename)
    with open(file_path, "r", encoding="UTF-8") as file:
        result = json.load(file)
    return result
