"""Language selection for bot responses.

String tables are registered statically per `Language` member, so a stored
language tag can only ever select one of the tables below.
"""

import enum
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Union

from . import de_DE, en_GB, fr_FR

if TYPE_CHECKING:
    from ..config_store import ConfigStore

_logger = logging.getLogger(__name__)


class Language(str, enum.Enum):
    EN_GB = "en_GB"
    FR_FR = "fr_FR"
    DE_DE = "de_DE"

    @classmethod
    def from_tag(cls, tag: object) -> Optional["Language"]:
        """Return the member for `tag`, or `None` for anything else."""
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


STRING_TABLES: Mapping[Language, Mapping[str, str]] = MappingProxyType(
    {
        Language.EN_GB: MappingProxyType(en_GB.STRINGS),
        Language.FR_FR: MappingProxyType(fr_FR.STRINGS),
        Language.DE_DE: MappingProxyType(de_DE.STRINGS),
    }
)

GLOBAL_STRINGS: Mapping[str, str] = STRING_TABLES[Language.EN_GB]


def available_languages() -> str:
    return ", ".join(f"`{lang.value}`" for lang in Language)


async def strings_for(
    store: "ConfigStore", id: Union[int, str]
) -> Optional[Mapping[str, str]]:
    """Fetch the string table for the language the given user has configured.

    Args:
        store (ConfigStore): The configuration store to read from.
        id (Union[int, str]): The ID of the user.

    Returns:
        Optional[Mapping[str, str]]: The string table, or `None` if the user has
          no stored configuration, no language or a language tag that is not
          supported.
    """
    config = await store.read_user_config(id)
    if config is None:
        return None

    language = Language.from_tag(config.language)
    if language is None:
        if config.language is not None:
            _logger.debug(
                "Ignoring unsupported language tag %r for identity %s",
                config.language,
                id,
            )
        return None

    return STRING_TABLES.get(language)


async def localized(store: "ConfigStore", id: Union[int, str]) -> Mapping[str, str]:
    return await strings_for(store, id) or GLOBAL_STRINGS
