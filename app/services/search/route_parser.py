"""
Permitted route parser - expands a carrier routing template into blueprint paths
"""
import logging
from typing import List

from .records import BlueprintPath, PermittedRouteRecord

logger = logging.getLogger(__name__)

IATA_CODE_LENGTH = 3


def split_transfer_code(transfer_code: str) -> List[str]:
    """
    Split a concatenated transfer code into airport codes.

    "OVB" -> ["OVB"], "VVOOVB" -> ["VVO", "OVB"].
    Returns an empty list when the code is empty or not a multiple of 3 characters.
    """
    if not transfer_code or len(transfer_code) % IATA_CODE_LENGTH != 0:
        return []

    return [
        transfer_code[i:i + IATA_CODE_LENGTH]
        for i in range(0, len(transfer_code), IATA_CODE_LENGTH)
    ]


def expand_blueprint_paths(route: PermittedRouteRecord) -> List[BlueprintPath]:
    """
    Expand a permitted route into the airport sequences a search must fill.

    Args:
        route: The carrier's routing template

    Returns:
        Distinct blueprint paths in template order: the direct path first
        (if allowed), then one path per valid transfer code. Empty when the
        route allows nothing.
    """
    paths: List[BlueprintPath] = []

    if route.direct:
        paths.append([route.origin_iata, route.destination_iata])

    for transfer_code in route.transfer_iata_codes:
        transfers = split_transfer_code(transfer_code)
        if not transfers:
            logger.warning(
                "Skipping malformed transfer code %r on permitted route %s %s-%s",
                transfer_code, route.carrier, route.origin_iata, route.destination_iata
            )
            continue

        path = [route.origin_iata, *transfers, route.destination_iata]
        if path not in paths:
            paths.append(path)

    return paths
