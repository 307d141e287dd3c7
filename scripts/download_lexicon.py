#!/usr/bin/env python3
"""
Загрузка словаря по HTTP

Словарь - JSON-объект {"слово": "написание пегоном"}.
Скачанный файл проверяется и сохраняется с отступами в UTF-8.

Запуск:
    python scripts/download_lexicon.py https://example.org/lexicon.json
    python scripts/download_lexicon.py URL -o data/lexicon.json --merge
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import requests

sys.path.insert(0, str(Path(__file__).parent.parent))

from pegon.lexicon import Lexicon, UrlResource


def download_lexicon(
    url: str,
    output_path: str,
    merge: bool = False,
    session: Optional[requests.Session] = None,
) -> Lexicon:
    """
    Скачивание, проверка и сохранение словаря.

    Args:
        url: Адрес JSON-словаря
        output_path: Куда сохранить
        merge: Дополнить встроенный словарь (скачанные записи важнее)
        session: requests.Session (для тестов)

    Returns:
        Сохранённый словарь

    Raises:
        requests.RequestException: Сеть недоступна
        ValueError: Ответ не является словарём или словарь пуст
    """
    resource = UrlResource(url, session=session)
    lexicon = Lexicon.parse(resource.read(), source=url)

    if not len(lexicon):
        raise ValueError(f"Lexicon at {url} is empty")

    if merge:
        entries = dict(Lexicon.bundled().entries)
        entries.update(lexicon.entries)
        lexicon = Lexicon.from_mapping(entries, source=url)

    lexicon.save(output_path)
    return lexicon


def main():
    parser = argparse.ArgumentParser(description="Загрузка словаря пегона")
    parser.add_argument("url", help="URL JSON-словаря")
    parser.add_argument("-o", "--output", default="data/lexicon.json", help="Куда сохранить")
    parser.add_argument("--merge", action="store_true", help="Объединить со встроенным словарём")
    args = parser.parse_args()

    print("=" * 50)
    print(f"Загрузка словаря: {args.url}")
    print("=" * 50)

    try:
        lexicon = download_lexicon(args.url, args.output, merge=args.merge)
    except requests.RequestException as e:
        print(f"Ошибка сети: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Неверный словарь: {e}")
        sys.exit(1)

    print(f"\nСохранено {len(lexicon)} слов: {args.output}")


if __name__ == "__main__":
    main()
