"""Консольный интерфейс: стоп-слова, корпус и запросы читаются построчно."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from application.services.paginator import paginate
from application.use_cases.ingest_documents import ingest_documents, read_documents
from application.use_cases.search import match_documents, search
from domain.entities import DocumentStatus
from domain.errors import InvalidArgumentError
from infrastructure.config import ContainerConfig, build_default_container
from infrastructure.input.stream_line_reader import StreamLineReader
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)

PAGE_BREAK = "Разрыв страницы"


def run(
    source: TextIO,
    output: TextIO,
    *,
    page_size: int = 2,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    match: bool = False,
) -> int:
    """Прочитать корпус и ответить на запросы; вернуть число запросов без результатов.

    Некорректный корпус печатается как ошибка, запросы после него не читаются.
    """

    reader = StreamLineReader(source)
    container = build_default_container(ContainerConfig(stop_words=reader.read_line(), page_size=page_size))
    try:
        entries = read_documents(reader)
    except ValueError as exc:
        logger.error("Некорректный корпус: %s", exc)
        print(f"Ошибка во входных данных: {exc}", file=output)
        return 0
    report = ingest_documents(entries, server=container.search_server)
    logger.info("Проиндексировано %d из %d документов", report.indexed, report.total)

    while True:
        query = reader.read_line()
        if not query:
            break
        print(f"Результаты поиска по запросу: {query}", file=output)
        try:
            if match:
                for row in match_documents(query, server=container.search_server):
                    words = " ".join(row.matched_words)
                    print(f"{{ document_id = {row.document_id}, status = {row.status.name}, words = {words} }}", file=output)
                continue
            results = search(query, request_queue=container.request_queue, status_or_predicate=status)
        except InvalidArgumentError as exc:
            print(f"Ошибка в поисковом запросе: {exc}", file=output)
            continue
        for page in paginate(results, container.page_size):
            for document in page:
                print(document, file=output)
            print(PAGE_BREAK, file=output)

    return container.request_queue.get_no_result_requests()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Файл с входными данными (по умолчанию: stdin)",
    )
    parser.add_argument("--page-size", type=int, default=2, help="Документов на странице (по умолчанию: 2)")
    parser.add_argument(
        "--status",
        choices=[status.name for status in DocumentStatus],
        default=DocumentStatus.ACTUAL.name,
        help="Статус документов для поиска",
    )
    parser.add_argument("--match", action="store_true", help="Показывать совпавшие слова для каждого документа.")
    parser.add_argument("--log-level", default=None, help="Уровень логирования")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)
    status = DocumentStatus[args.status]
    if args.input is None:
        no_results = run(sys.stdin, sys.stdout, page_size=args.page_size, status=status, match=args.match)
    else:
        with args.input.open(encoding="utf-8") as source:
            no_results = run(source, sys.stdout, page_size=args.page_size, status=status, match=args.match)
    logger.info("Запросов без результатов: %d", no_results)


if __name__ == "__main__":
    main()
