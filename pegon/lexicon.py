"""
Словарь слов с фиксированным написанием

Религиозные и культурные термины (assalamualaikum, insyaallah, ...)
пишутся по арабской традиции, а не по фонетическим правилам.
Если слово есть в словаре, оно заменяется целиком и посимвольная
конвертация для него не выполняется.

Источник словаря передаётся снаружи (файл или URL). Если источник
недоступен или повреждён, словарь остаётся пустым и конвертация
продолжается по правилам.
"""

import json
import logging
import time
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

import requests


logger = logging.getLogger(__name__)

DEFAULT_LEXICON_PATH = Path(__file__).parent / "data" / "lexicon.json"


class FileResource:
    """Словарь из локального файла"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> str:
        with open(self.path, "r", encoding="utf-8-sig") as f:
            return f.read()

    def __repr__(self) -> str:
        return f"FileResource({str(self.path)!r})"


class UrlResource:
    """Словарь по HTTP с повторными попытками"""

    USER_AGENT = "pegon-translit/1.0"

    def __init__(
        self,
        url: str,
        timeout: float = 30,
        retries: int = 3,
        backoff: float = 1.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            url: Адрес JSON-файла словаря
            timeout: Таймаут запроса в секундах
            retries: Количество попыток
            backoff: Пауза между попытками (растёт линейно)
            session: Готовая сессия requests (например, в тестах)
        """
        self.url = url
        self.timeout = timeout
        self.retries = max(1, retries)
        self.backoff = backoff
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})

    def read(self) -> str:
        last_error: Optional[requests.RequestException] = None

        for attempt in range(1, self.retries + 1):
            try:
                response = self.session.get(self.url, timeout=self.timeout)
                response.raise_for_status()
                return response.content.decode("utf-8-sig")
            except requests.RequestException as e:
                last_error = e
                logger.warning("Ошибка запроса %s (попытка %d/%d): %s", self.url, attempt, self.retries, e)
                if attempt < self.retries:
                    time.sleep(self.backoff * attempt)

        raise last_error

    def __repr__(self) -> str:
        return f"UrlResource({self.url!r})"


class Lexicon:
    """
    Неизменяемый словарь: латинское слово (нижний регистр) → написание пегоном.

    Пример использования:
    ```python
    lexicon = Lexicon.from_source("data/lexicon.json")
    lexicon.lookup_word("Bismillah")  # "بسم الله"
    ```
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None, source: str = ""):
        normalized: Dict[str, str] = {}
        inverse: Dict[str, str] = {}
        for word, pegon in (entries or {}).items():
            key = word.strip().lower()
            normalized[key] = pegon
            # Обратный поиск только для однословных написаний
            if pegon and not any(ch.isspace() for ch in pegon):
                inverse.setdefault(pegon, key)

        self._entries = MappingProxyType(normalized)
        self._inverse = MappingProxyType(inverse)
        self.source = source

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def lookup_word(self, word: str) -> Optional[str]:
        """Точное совпадение без учёта регистра"""
        return self._entries.get(word.lower())

    def lookup_pegon(self, pegon: str) -> Optional[str]:
        """Обратный поиск: слово пегона → латинский ключ"""
        return self._inverse.get(pegon)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @classmethod
    def from_mapping(cls, entries: Mapping[str, str], source: str = "") -> "Lexicon":
        """Словарь из готового отображения"""
        return cls(dict(entries), source=source)

    @classmethod
    def parse(cls, text: str, source: str = "") -> "Lexicon":
        """
        Разбор JSON-объекта {"слово": "написание"}.

        Raises:
            ValueError: Если это не JSON или не объект
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Lexicon must be a JSON object, got {type(data).__name__}")

        entries = {}
        for word, pegon in data.items():
            if not isinstance(pegon, str) or not word.strip():
                logger.warning("Пропущена запись словаря %r: %r", word, pegon)
                continue
            entries[word] = pegon
        return cls(entries, source=source)

    @classmethod
    def load(cls, provider) -> "Lexicon":
        """
        Загрузка из источника; при любой ошибке - пустой словарь.

        Args:
            provider: Объект с методом read() -> str (FileResource, UrlResource)
        """
        try:
            lexicon = cls.parse(provider.read(), source=repr(provider))
        except (OSError, requests.RequestException, ValueError) as e:
            logger.warning("Словарь %r недоступен, используется пустой: %s", provider, e)
            return cls(source=repr(provider))

        logger.info("Загружено %d слов из %r", len(lexicon), provider)
        return lexicon

    @classmethod
    def from_source(cls, source: Optional[Union[str, Path]]) -> "Lexicon":
        """Файл или URL (http/https)"""
        if not source:
            return cls()
        source = str(source)
        if source.startswith(("http://", "https://")):
            return cls.load(UrlResource(source))
        return cls.load(FileResource(source))

    @classmethod
    def bundled(cls) -> "Lexicon":
        """Словарь, поставляемый с пакетом"""
        return cls.load(FileResource(DEFAULT_LEXICON_PATH))

    def save(self, path: Union[str, Path]) -> None:
        """Сохранение словаря в JSON"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(dict(self._entries), f, ensure_ascii=False, indent=2)

    def summary(self) -> str:
        lines = ["Lexicon"]
        lines.append(f"  Source:   {self.source or '(none)'}")
        lines.append(f"  Entries:  {len(self):,}")
        return "\n".join(lines)
