import json
import os
from typing import Iterable

from pydantic import BaseModel


def write_jsonl(rows_iter: Iterable[BaseModel], path: str, append: bool = True):
  directory = os.path.dirname(path)
  if directory:
    os.makedirs(directory, exist_ok=True)
  with open(path, "a" if append else "w", encoding="utf-8") as f:
    for r in rows_iter:
      f.write(json.dumps(r.model_dump(mode="json"), ensure_ascii=False) + "\n")
