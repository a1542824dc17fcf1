# app/Catalog/utils/naming.py
import re
import time
import unicodedata
from pathlib import PurePath


def file_base_name(file_name: str, default: str = "imagem") -> str:
    # Имя исходного файла без расширения, только [a-z0-9_-]
    name = PurePath((file_name or "").replace("\\", "/")).name
    name = re.sub(r"\.[^.]+$", "", name)
    name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    name = name.lower()
    name = re.sub(r"[^a-z0-9_-]", "_", name)
    name = re.sub(r"_+", "_", name)
    name = name.strip("_-")
    return name or default


def artifact_name(product_id: str, file_name: str, extension: str, timestamp: bool = False) -> str:
    parts = [str(product_id)]
    if timestamp:
        parts.append(str(int(time.time() * 1000)))
    parts.append(file_base_name(file_name))
    return f"{'-'.join(parts)}.{extension}"
