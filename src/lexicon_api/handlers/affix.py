#!/usr/bin/env python3

import logging

from fastapi import HTTPException

from ..clients.dgraph_client import DgraphError
from ..models.models import Affix, NewAffix
from ..services.affix_service import AffixError, AffixExistsError, AffixNotFoundError, AffixService

logger = logging.getLogger(__name__)


def handle_add_affix(new_affix: NewAffix, service: AffixService) -> Affix:
    """Add an affix; 409 with the stored affix if the morpheme is taken"""
    try:
        return service.add(new_affix)
    except AffixExistsError as e:
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "affix": e.affix.model_dump(mode="json")},
        ) from e
    except (AffixError, DgraphError) as e:
        logger.error(f"Adding affix failed: {e}")
        raise HTTPException(status_code=500, detail=f"Adding affix failed: {str(e)}") from e


def handle_get_affix(affix_id: str, service: AffixService) -> Affix:
    """Get an affix by id"""
    try:
        return service.one(affix_id)
    except AffixNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DgraphError as e:
        logger.error(f"Affix query failed: {e}")
        raise HTTPException(status_code=500, detail=f"Affix query failed: {str(e)}") from e


def handle_find_affix(morpheme: str, service: AffixService) -> Affix:
    """Get the affix with the given morpheme"""
    try:
        return service.one_by_morpheme(morpheme)
    except AffixNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DgraphError as e:
        logger.error(f"Affix query failed: {e}")
        raise HTTPException(status_code=500, detail=f"Affix query failed: {str(e)}") from e
