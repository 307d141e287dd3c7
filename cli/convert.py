#!/usr/bin/env python3
"""
CLI интерфейс для транслитерации латиницы в пегон

Примеры использования:
    python -m cli.convert "apa kabar?"
    python -m cli.convert --harakah terima kasih
    python -m cli.convert --reverse "كيتا"
    python -m cli.convert --interactive
"""

import argparse
import logging
import sys
from typing import List, Optional

from pegon import __version__
from pegon.config import EngineConfig
from pegon.converter import ConversionError, Direction, PegonConverter, detect_direction
from pegon.glyphs import VARIANTS, ContextRule
from pegon.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pegon",
        description="Pegon Translit - транслитерация латиницы в пегон",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s apa kabar?
  %(prog)s --harakah "terima kasih"
  %(prog)s -r "كيتا"
  %(prog)s -i  # интерактивный режим
        """
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Текст для конвертации (аргументы склеиваются через пробел)"
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--manual",
        action="store_true",
        help="Показать таблицу правил"
    )

    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Пегон → латиница"
    )
    direction.add_argument(
        "-a", "--auto",
        action="store_true",
        help="Определить направление по тексту"
    )

    parser.add_argument(
        "-H", "--harakah",
        action="store_true",
        help="Расставить харакат"
    )

    parser.add_argument(
        "-l", "--lexicon",
        help="Путь или URL словаря (default: встроенный)"
    )

    parser.add_argument(
        "--no-lexicon",
        action="store_true",
        help="Не использовать словарь"
    )

    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="pegon",
        help="Вариант орфографии (default: pegon)"
    )

    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Интерактивный режим"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.text and not args.interactive and not args.manual:
        parser.print_help()
        return 0

    setup_logging(logging.WARNING)

    config = EngineConfig(
        variant=args.variant,
        harakah=args.harakah,
        lexicon_source=args.lexicon,
        use_lexicon=not args.no_lexicon,
    )
    converter = PegonConverter.from_config(config)

    if args.manual:
        print_manual(converter)
        return 0

    if args.interactive:
        run_interactive(converter)
        return 0

    text = " ".join(args.text)
    if args.reverse:
        direction = Direction.PEGON_TO_LATIN
    elif args.auto:
        direction = detect_direction(text)
    else:
        direction = Direction.LATIN_TO_PEGON

    try:
        print(converter.convert(text, direction, args.harakah))
    except ConversionError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    return 0


def run_interactive(converter: PegonConverter):
    """Интерактивный режим"""
    print("Интерактивный режим Pegon Translit")
    print("=" * 50)
    print("Команды:")
    print("  /harakah - включить/выключить харакат")
    print("  /reverse - пегон → латиница и обратно")
    print("  /help    - помощь")
    print("  /exit    - выход")
    print("=" * 50)
    print()

    harakah = converter.harakah
    direction = Direction.LATIN_TO_PEGON

    while True:
        try:
            user_input = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nSampai jumpa!")
            break

        if not user_input:
            continue

        command = user_input.lower()

        if command in ['/exit', '/quit', '/q', 'exit', 'quit']:
            print("Sampai jumpa!")
            break

        if command == '/help':
            print_help()
            continue

        if command == '/harakah':
            harakah = not harakah
            print(f"Харакат: {'вкл' if harakah else 'выкл'}")
            continue

        if command == '/reverse':
            if direction is Direction.LATIN_TO_PEGON:
                direction = Direction.PEGON_TO_LATIN
            else:
                direction = Direction.LATIN_TO_PEGON
            print(f"Направление: {direction.value}")
            continue

        try:
            print(converter.convert(user_input, direction, harakah))
        except ConversionError as e:
            print(f"Ошибка: {e}")


def print_manual(converter: PegonConverter):
    """Вывод таблицы правил в порядке приоритета"""
    table = converter.table

    print(table.summary())
    print()
    print("Правила (в порядке приоритета):")
    for rule in table.rules():
        context = " (перед гласной)" if isinstance(rule, ContextRule) else ""
        print(f"  {rule.pattern:<4} → {rule.glyph}{context}")

    print()
    print("Гласные (в начале слова / в середине):")
    for vowel, carrier in table.carriers.items():
        print(f"  {vowel:<4} → {carrier} / {table.vowels.get(vowel, '-')}")

    print()
    print("Цифры и пунктуация:")
    symbols = {**table.numerals, **table.punctuation}
    print("  " + "  ".join(f"{latin} → {glyph}" for latin, glyph in symbols.items()))


def print_help():
    """Вывод справки"""
    print("""
Справка Pegon Translit
======================

Введите текст латиницей, например:
  "apa kabar?"
  "terima kasih"
  "selamat pagi"

Гласные:
  e  - пепет (выпадает, с харакатом - знак над согласной)
  é  - таленг (пишется буквой ي)
  ê  - явный пепет

Команды:
  /harakah - включить/выключить харакат
  /reverse - сменить направление
  /exit    - выход
""")


if __name__ == "__main__":
    sys.exit(main())
