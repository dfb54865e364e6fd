"""
Static ATM locations shown by the locator view.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from localcoin.data.models import Atm, AtmStatus

SAMPLE_ATMS: Sequence[Atm] = (
    Atm(1, "Toronto", AtmStatus.ONLINE, 43.6532, -79.3832),
    Atm(2, "Montreal", AtmStatus.OFFLINE, 45.5017, -73.5673),
    Atm(3, "Vancouver", AtmStatus.ONLINE, 49.2827, -123.1207),
    Atm(4, "Calgary", AtmStatus.ONLINE, 51.0447, -114.0719),
    Atm(5, "Ottawa", AtmStatus.OFFLINE, 45.4215, -75.6972),
    Atm(6, "Edmonton", AtmStatus.ONLINE, 53.5461, -113.4938),
    Atm(7, "Winnipeg", AtmStatus.ONLINE, 49.8951, -97.1384),
    Atm(8, "Quebec City", AtmStatus.OFFLINE, 46.8139, -71.2080),
)

_BY_ID: Dict[int, Atm] = {atm.id: atm for atm in SAMPLE_ATMS}


def get_atm(atm_id: Optional[int]) -> Optional[Atm]:
    if atm_id is None:
        return None
    return _BY_ID.get(int(atm_id))
