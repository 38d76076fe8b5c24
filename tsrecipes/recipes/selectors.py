"""Селекторы колонок для шагов рецепта."""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple, Union

from tsrecipes.common.exceptions import ConfigurationError
from tsrecipes.common.interfaces import ColumnSelector
from tsrecipes.common.validation import is_numeric_dtype

logger = logging.getLogger(__name__)

Schema = Mapping[str, object]
SelectorLike = Union[str, ColumnSelector]


@dataclass(frozen=True)
class ColumnName:
    """Явное имя колонки."""

    name: str

    def resolve(self, schema: Schema) -> List[str]:
        if self.name not in schema:
            raise ConfigurationError(f"Колонка {self.name} не найдена в схеме")
        return [self.name]

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class AllOf:
    """Набор явных имён колонок, все должны присутствовать."""

    names: Tuple[str, ...]

    def resolve(self, schema: Schema) -> List[str]:
        missing = [name for name in self.names if name not in schema]
        if missing:
            raise ConfigurationError(f"Колонки не найдены в схеме: {missing}")
        return list(self.names)

    def describe(self) -> str:
        return f"all_of({', '.join(self.names)})"


@dataclass(frozen=True)
class Where:
    """
    Колонки, для которых предикат (имя, тип) истинен.

    Порядок результата совпадает с порядком колонок в схеме.
    """

    predicate: Callable[[str, object], bool]
    label: str

    def resolve(self, schema: Schema) -> List[str]:
        return [name for name, dtype in schema.items() if self.predicate(name, dtype)]

    def describe(self) -> str:
        return self.label


def all_of(*names: str) -> AllOf:
    """Выбрать колонки по списку имён."""
    return AllOf(tuple(names))


def where(predicate: Callable[[str, object], bool], label: str = "where(...)") -> Where:
    """Выбрать колонки по произвольному предикату от (имя, тип)."""
    return Where(predicate, label)


def all_numeric() -> Where:
    """Все числовые колонки (bool не считается числовым)."""
    return Where(lambda _name, dtype: is_numeric_dtype(dtype), "all_numeric()")


def starts_with(prefix: str) -> Where:
    return Where(lambda name, _dtype: str(name).startswith(prefix), f"starts_with({prefix!r})")


def ends_with(suffix: str) -> Where:
    return Where(lambda name, _dtype: str(name).endswith(suffix), f"ends_with({suffix!r})")


def contains(substring: str) -> Where:
    return Where(lambda name, _dtype: substring in str(name), f"contains({substring!r})")


def matches(pattern: str) -> Where:
    """Колонки, имя которых совпадает с регулярным выражением (re.search)."""
    compiled = re.compile(pattern)
    return Where(lambda name, _dtype: compiled.search(str(name)) is not None, f"matches({pattern!r})")


def as_selector(selector: SelectorLike) -> ColumnSelector:
    """
    Привести строку или селектор к селектору.

    Raises:
        ConfigurationError: Если объект не является селектором
    """
    if isinstance(selector, str):
        return ColumnName(selector)
    if isinstance(selector, ColumnSelector):
        return selector
    raise ConfigurationError(f"Неподдерживаемый селектор колонок: {selector!r}")


def describe_selectors(selectors: Iterable[SelectorLike]) -> List[str]:
    """Текстовые описания селекторов для tidy и repr."""
    return [as_selector(selector).describe() for selector in selectors]


def resolve_columns(selectors: Sequence[SelectorLike], schema: Schema) -> List[str]:
    """
    Разрешить селекторы в упорядоченный список колонок.

    Результаты селекторов объединяются в порядке их перечисления,
    повторно выбранные колонки пропускаются.

    Args:
        selectors: Имена колонок или селекторы
        schema: Отображение имя колонки -> тип

    Returns:
        Список имён колонок без повторов

    Raises:
        ConfigurationError: Если селекторы не заданы или явная колонка отсутствует
    """
    if not selectors:
        raise ConfigurationError("Не задано ни одного селектора колонок")

    columns: List[str] = []
    for selector in selectors:
        for name in as_selector(selector).resolve(schema):
            if name not in columns:
                columns.append(name)

    if not columns:
        logger.warning("Селекторы %s не выбрали ни одной колонки", describe_selectors(selectors))
    return columns
