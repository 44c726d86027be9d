"""Location registry: short ASCII codes to canonical CWA region names."""

from collections.abc import Mapping
from types import MappingProxyType

LOCATIONS: Mapping[str, str] = MappingProxyType({
    # Northern
    "taipei": "台北市",
    "newtaipei": "新北市",
    "keelung": "基隆市",
    "taoyuan": "桃園市",
    "hsinchu": "新竹市",
    "hsinchucounty": "新竹縣",
    "miaoli": "苗栗縣",
    # Central
    "taichung": "台中市",
    "nantou": "南投縣",
    "changhua": "彰化縣",
    "yunlin": "雲林縣",
    # Southern
    "chiayi": "嘉義市",
    "chiayi_county": "嘉義縣",
    "tainan": "台南市",
    "kaohsiung": "高雄市",
    "pingtung": "屏東縣",
    # Eastern
    "yilan": "宜蘭縣",
    "taitung": "台東縣",
    "hualien": "花蓮縣",
    # Outlying islands
    "penghu": "澎湖縣",
    "kinmen": "金門縣",
    "lienchiang": "連江縣",
})


class LocationRegistry:
    """Read-only lookup over a code -> name table.

    The table is held by reference, never copied; only `all_entries`
    hands out an owned snapshot.
    """

    def __init__(self, table: Mapping[str, str] = LOCATIONS):
        self._table = table

    def resolve(self, code: str | None) -> str | None:
        """Return the canonical name for `code`, or None if unknown.

        Lookup is case-insensitive and ignores surrounding whitespace.
        """
        if not code or not isinstance(code, str):
            return None
        return self._table.get(code.strip().lower())

    def is_known(self, code: str | None) -> bool:
        return self.resolve(code) is not None

    def resolve_or_passthrough(self, token: str) -> str:
        """Resolve a known code; hand anything else back unchanged.

        Lets callers pass a native region name (e.g. "高雄市") directly.
        """
        name = self.resolve(token)
        return name if name is not None else token

    def all_codes(self) -> list[str]:
        return list(self._table)

    def all_entries(self) -> dict[str, str]:
        return dict(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_known(code)


REGISTRY = LocationRegistry()
