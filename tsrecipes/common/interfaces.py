"""Protocol интерфейсы для основных компонентов."""

from typing import List, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ColumnSelector(Protocol):
    """Protocol для селектора колонок."""

    def resolve(self, schema: Mapping[str, object]) -> List[str]:
        """
        Разрешить селектор в список колонок.

        Args:
            schema: Отображение имя колонки -> тип, в порядке колонок

        Returns:
            Упорядоченный список имён колонок
        """
        ...  # pragma: no cover

    def describe(self) -> str:
        """
        Текстовое описание селектора.

        Returns:
            Описание для tidy/repr
        """
        ...  # pragma: no cover
