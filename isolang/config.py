"""
Feature configuration for language tables.

Each toggle trades memory for functionality. A table built with a feature
disabled never loads that feature's data and does not expose its methods.
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T", bound="LanguageTableConfig")


@dataclass
class LanguageTableConfig:
    """
    Configuration for a :class:`isolang.table.LanguageTable`.

    Attributes:
        english_names: Load English names and enable ``from_name``/``to_name``.
        lowercase_names: Match names case-insensitively by lower-casing both
            the input and the table keys. Requires english_names.
        local_names: Load autonyms and enable ``from_autonym``/``to_autonym``.
        list_languages: Enable ``all_languages`` enumeration.
    """

    english_names: bool = True
    lowercase_names: bool = False
    local_names: bool = False
    list_languages: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.lowercase_names and not self.english_names:
            raise ValueError("lowercase_names requires english_names to be enabled")

    @classmethod
    def from_dict(cls: type[T], config_dict: dict[str, Any]) -> T:
        """
        Build a feature set from a mapping of toggle names to booleans.

        Args:
            config_dict: Any of ``english_names``, ``lowercase_names``,
                ``local_names`` and ``list_languages``; missing keys keep
                their defaults.

        Returns:
            The validated feature set.

        Raises:
            TypeError: If a key is not a known feature.
            ValueError: If ``lowercase_names`` is set without ``english_names``.
        """
        return cls(**config_dict)

    @classmethod
    def from_json(cls: type[T], json_path: str | Path) -> T:
        """
        Read a feature set from an ``isolang.json`` file.

        The file holds one JSON object with the same keys as :meth:`from_dict`,
        as written by ``python -m isolang --create-config``.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        path = Path(json_path)
        with path.open("r", encoding="utf-8") as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> dict[str, Any]:
        """Map each feature toggle name to whether it is enabled."""
        return asdict(self)

    def to_json(self, json_path: str | Path, indent: int = 2) -> None:
        """
        Write the feature toggles to a JSON file readable by :meth:`from_json`.

        Missing parent directories are created.
        """
        path = Path(json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=indent)
