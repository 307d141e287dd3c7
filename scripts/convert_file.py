#!/usr/bin/env python3
"""
Конвертация текстового файла построчно

Запуск:
    python scripts/convert_file.py input.txt output.txt
    python scripts/convert_file.py input.txt output.txt --harakah
    python scripts/convert_file.py pegon.txt latin.txt --reverse
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, Union

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from pegon.config import EngineConfig
from pegon.converter import Direction, PegonConverter


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    converter: PegonConverter,
    direction: Direction = Direction.LATIN_TO_PEGON,
    harakah: bool = False,
) -> Dict[str, int]:
    """
    Построчная конвертация файла.

    Args:
        input_path: Исходный файл (UTF-8)
        output_path: Файл результата (UTF-8)
        converter: Конвертер
        direction: Направление
        harakah: Расставлять харакат

    Returns:
        Статистика: lines, converted, empty
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(input_path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()

    stats = {"lines": len(lines), "converted": 0, "empty": 0}

    with open(output_path, 'w', encoding='utf-8') as f:
        for line in tqdm(lines, desc="Конвертация"):
            if not line.strip():
                stats["empty"] += 1
                f.write('\n')
                continue

            f.write(converter.convert(line, direction, harakah))
            f.write('\n')
            stats["converted"] += 1

    return stats


def main():
    parser = argparse.ArgumentParser(description="Конвертация файла латиница ↔ пегон")
    parser.add_argument("input", help="Исходный файл")
    parser.add_argument("output", help="Файл результата")
    parser.add_argument("-r", "--reverse", action="store_true", help="Пегон → латиница")
    parser.add_argument("-H", "--harakah", action="store_true", help="Расставить харакат")
    parser.add_argument("-l", "--lexicon", help="Путь или URL словаря")
    parser.add_argument("--variant", default="pegon", help="Вариант орфографии")
    args = parser.parse_args()

    config = EngineConfig(variant=args.variant, lexicon_source=args.lexicon)
    converter = PegonConverter.from_config(config)
    direction = Direction.PEGON_TO_LATIN if args.reverse else Direction.LATIN_TO_PEGON

    print("=" * 50)
    print(f"Конвертация: {args.input} ({direction.value})")
    print("=" * 50)

    stats = convert_file(args.input, args.output, converter, direction, args.harakah)

    print("\n" + "=" * 50)
    print("РЕЗУЛЬТАТ:")
    print(f"  Строк:         {stats['lines']}")
    print(f"  Сконвертировано: {stats['converted']}")
    print(f"  Пустых:        {stats['empty']}")
    print(f"  Сохранено:     {args.output}")
    print("=" * 50)


if __name__ == "__main__":
    main()
