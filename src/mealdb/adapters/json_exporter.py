"""Serialización JSON de resultados.

Formato estable (UTF-8, indentado, claves ordenadas) para imprimir o guardar
lo que devuelve el cliente.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dump_results(results: Any) -> str:
    return json.dumps(results, ensure_ascii=False, indent=2, sort_keys=True)


def export_results_json(*, results: Any, output_path: Path) -> Path:
    """Escribe `results` en `output_path` como JSON UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_results(results) + "\n", encoding="utf-8")
    return output_path
