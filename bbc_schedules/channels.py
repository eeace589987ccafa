"""
Channel catalogue

Read-only lookup tables for the BBC Radio channels, the Radio 1 regional
variants and the Radio 4 broadcast bands.
"""
from types import MappingProxyType


CHANNELS = MappingProxyType({
    "radio1": "Radio 1",
    "1xtra": "1Xtra",
    "radio2": "Radio 2",
    "radio3": "Radio 3",
    "radio4": "Radio 4",
    "radio4extra": "Radio 4 Extra",
    "5live": "5 Live",
    "5livesportsextra": "5 Live Sports Extra",
    "6music": "6 Music",
    "radio7": "Radio 7",
    "asiannetwork": "Asian Network",
    "worldservice": "World Service",
})

LOCATIONS = MappingProxyType({
    "radio1": MappingProxyType({
        "england": "England",
        "northernireland": "Northern Ireland",
        "scotland": "Scotland",
        "wales": "Wales",
    }),
})

FREQUENCIES = MappingProxyType({
    "radio4": MappingProxyType({
        "fm": "FM",
        "lw": "LW",
    }),
})


def describe_channels() -> list[dict]:
    """
    Build a serialisable view of the catalogue

    Returns:
        One dict per channel with its code, display name and the
        location / frequency codes it accepts (empty dicts when none)
    """
    return [
        {
            "code": code,
            "name": name,
            "locations": dict(LOCATIONS.get(code, {})),
            "frequencies": dict(FREQUENCIES.get(code, {})),
        }
        for code, name in CHANNELS.items()
    ]


__all__ = [
    "CHANNELS",
    "LOCATIONS",
    "FREQUENCIES",
    "describe_channels",
]
