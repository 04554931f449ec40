from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import log_level
from .engine import StatementParser


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Bank Statement Extractor")
    parser.add_argument("file", help="Ruta al PDF (o .txt con --text)")
    parser.add_argument("--out", default="", help="Ruta de salida JSON (opcional)")
    parser.add_argument("--text", action="store_true", help="El archivo ya es texto extraido")
    parser.add_argument("--log-level", default=log_level(), help="Nivel de logging (default: INFO)")
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    path = Path(args.file)
    if not path.exists():
        raise SystemExit(f"No existe el archivo: {path}")

    console.print(f"Procesando: {path}", style="bold")

    engine = StatementParser()
    if args.text:
        result = engine.parse_text(path.read_text(encoding="utf-8"))
    else:
        result = engine.parse_pdf(path.read_bytes())

    payload = result.model_dump_json(by_alias=True, indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload, encoding="utf-8")
        console.print(f"OK -> {out_path}", style="bold green")
    else:
        print(payload)

    if not result.success:
        console.print(f"Error: {result.error}", style="bold red")
        return 1

    console.print(
        f"Banco: {result.data.bank_variant.value} | Transacciones detectadas: {result.data.total_transactions}",
        style="bold cyan",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
