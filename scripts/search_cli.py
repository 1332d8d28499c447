"""Construye el índice del sitio y ejecuta una búsqueda desde la línea de comandos."""
from __future__ import annotations

import argparse
import asyncio

from domain.entities import SearchOptions
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query", help="Texto a buscar (o texto parcial con --suggest)")
    parser.add_argument("--category", help="Solo documentos de esta categoría")
    parser.add_argument("--kind", help="Solo documentos de este tipo (page, feature, dynamic)")
    parser.add_argument(
        "--limit",
        type=int,
        help="Máximo de resultados (por defecto: SCHOOLSEARCH_RESULT_LIMIT o 50)",
    )
    parser.add_argument("--snippets", action="store_true", help="Mostrar fragmentos del contenido")
    parser.add_argument("--authenticated", action="store_true", help="Incluir documentos que requieren sesión")
    parser.add_argument("--suggest", action="store_true", help="Mostrar sugerencias de autocompletado en lugar de resultados")
    parser.add_argument("--api-base-url", help="API de información para las categorías dinámicas")
    parser.add_argument(
        "--history",
        choices=("memory", "json", "sqlite"),
        help="Almacenamiento del historial (por defecto: SCHOOLSEARCH_HISTORY_BACKEND o json)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging()

    cfg = ContainerConfig.from_env()
    if args.api_base_url:
        cfg.api_base_url = args.api_base_url
    if args.history:
        cfg.history_backend = args.history
    container = build_default_container(cfg)
    engine = container.engine

    report = asyncio.run(engine.rebuild(container.collectors))
    if report.failed_collectors:
        print(f"Colectores con error: {', '.join(report.failed_collectors)}")

    if args.suggest:
        for suggestion in engine.suggestions(args.query):
            print(suggestion)
        return

    response = engine.search(
        args.query,
        SearchOptions(
            category=args.category,
            kind=args.kind,
            limit=engine.default_limit if args.limit is None else args.limit,
            include_snippet=args.snippets,
            is_authenticated=args.authenticated,
        ),
    )
    print(f"{response.total_matched} resultados en {response.elapsed_seconds * 1000:.2f} ms")
    for position, result in enumerate(response.results, start=1):
        print(f"{position:>2}. {result.document.title} [{result.document.category}] -> {result.document.url}")
        print(f"    score={result.score:.1f} weighted={result.weighted_score:.1f} terms={', '.join(result.matched_terms)}")
        if result.snippet is not None:
            print(f"    {result.snippet.text}")
    for suggestion in response.suggestions:
        print(suggestion)


if __name__ == "__main__":
    main()
