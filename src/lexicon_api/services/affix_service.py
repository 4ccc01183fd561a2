#!/usr/bin/env python3
"""
Affix Service

CRUD access to Affix nodes through Dgraph's generated GraphQL API.
Field names follow the Affix type in SCHEMA_DOCUMENT; media and note are
relationships and are exchanged as lists of node ids.
"""

import logging
from typing import Any

from ..clients.dgraph_client import DgraphClient
from ..models.models import Affix, NewAffix

logger = logging.getLogger(__name__)

AFFIX_FIELDS = """
            id
            example
            meaning
            media { id }
            morpheme
            note { id }
            tongue
            type
"""

GET_AFFIX_QUERY = f"""query getAffix($id: ID!) {{
        getAffix(id: $id) {{{AFFIX_FIELDS}        }}
    }}"""

QUERY_AFFIX_BY_MORPHEME = f"""query queryAffix($morpheme: String!) {{
        queryAffix(filter: {{morpheme: {{eq: $morpheme}}}}) {{{AFFIX_FIELDS}        }}
    }}"""

ADD_AFFIX_MUTATION = """mutation addAffix($affix: AddAffixInput!) {
        addAffix(input: [$affix]) {
            affix {
                id
            }
        }
    }"""


class AffixError(Exception):
    """Exception raised when an affix operation fails"""
    pass


class AffixNotFoundError(AffixError):
    """No affix matched the lookup"""
    pass


class AffixExistsError(AffixError):
    """An affix with the same morpheme is already stored; the stored one is attached"""

    def __init__(self, affix: Affix):
        super().__init__(f"affix exists: {affix.morpheme} ({affix.id})")
        self.affix = affix


class AffixService:
    """
    Service for reading and adding affixes.

    Example:
        ```python
        service = AffixService(get_dgraph_client())
        affix = service.add(NewAffix(morpheme="re", meaning=["again"], tongue=Tongue.ENGLISH))
        same = service.one(affix.id)
        ```
    """

    def __init__(self, dgraph_client: DgraphClient):
        self.dgraph_client = dgraph_client

    def add(self, new_affix: NewAffix) -> Affix:
        """
        Add a new affix to the database.

        Returns:
            The affix with the id assigned by the database

        Raises:
            AffixExistsError: If an affix with the same morpheme exists;
                the stored affix is available as `error.affix`
            AffixError: If the database doesn't return an id
        """
        result = self.dgraph_client.query(QUERY_AFFIX_BY_MORPHEME, {"morpheme": new_affix.morpheme})

        # Any match blocks the insert, including morphemes already stored twice
        existing = result.get("queryAffix") or []
        if existing:
            raise AffixExistsError(_from_record(existing[0]))

        result = self.dgraph_client.query(ADD_AFFIX_MUTATION, {"affix": _to_input(new_affix)})

        added = (result.get("addAffix") or {}).get("affix") or []
        if len(added) != 1 or not added[0].get("id"):
            raise AffixError("affix id not returned")

        affix = Affix(id=added[0]["id"], **new_affix.model_dump())
        logger.info(f"Added affix {affix.morpheme} with id {affix.id}")
        return affix

    def one(self, affix_id: str) -> Affix:
        """
        Get an affix by its database id.

        Raises:
            AffixNotFoundError: If no affix has this id
        """
        result = self.dgraph_client.query(GET_AFFIX_QUERY, {"id": affix_id})

        record = result.get("getAffix")
        if not record or not record.get("id"):
            raise AffixNotFoundError(f"affix not found: {affix_id}")

        return _from_record(record)

    def one_by_morpheme(self, morpheme: str) -> Affix:
        """
        Get the affix with the given morpheme.

        Raises:
            AffixNotFoundError: Unless exactly one affix matches
        """
        result = self.dgraph_client.query(QUERY_AFFIX_BY_MORPHEME, {"morpheme": morpheme})

        records = result.get("queryAffix") or []
        if len(records) != 1:
            raise AffixNotFoundError(f"affix not found: {morpheme} ({len(records)} matches)")

        return _from_record(records[0])


def _to_input(new_affix: NewAffix) -> dict[str, Any]:
    """Build an AddAffixInput value"""
    affix_input = {
        "example": new_affix.example,
        "meaning": new_affix.meaning,
        "media": [{"id": media_id} for media_id in new_affix.media],
        "morpheme": new_affix.morpheme,
        "note": [{"id": note_id} for note_id in new_affix.note],
        "type": [affix_type.value for affix_type in new_affix.affix_type],
    }
    if new_affix.tongue is not None:
        affix_input["tongue"] = new_affix.tongue.value
    return affix_input


def _from_record(record: dict[str, Any]) -> Affix:
    return Affix(
        id=record["id"],
        example=record.get("example") or [],
        meaning=record.get("meaning") or [],
        media=[media["id"] for media in record.get("media") or []],
        morpheme=record.get("morpheme") or "",
        note=[note["id"] for note in record.get("note") or []],
        tongue=record.get("tongue"),
        affix_type=record.get("type") or [],
    )
