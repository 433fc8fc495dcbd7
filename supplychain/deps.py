import re

from fastapi import Request

from supplychain.errors import InvalidIdentifierError
from supplychain.services.store import SupplyChainStore

# ASCII digits only; int() alone would also take "1_0", " 1" or full-width digits.
_ID_RE = re.compile(r"-?[0-9]+")

def get_store(request: Request) -> SupplyChainStore:
    # Built once in create_app(); tests build a fresh one per app.
    return request.app.state.store

def parse_id(raw: str, entity: str) -> int:
    """Integer path id, or 400 ``Invalid <entity> ID``."""
    if not _ID_RE.fullmatch(raw):
        raise InvalidIdentifierError(entity)
    return int(raw)
