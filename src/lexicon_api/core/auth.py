#!/usr/bin/env python3

import logging
import secrets

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .env_utils import getenv_clean

logger = logging.getLogger(__name__)
security = HTTPBearer()

# Development default only; admin routes can drop the whole database
DEFAULT_DEV_TOKEN = "devtoken"


def verify_token(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """Check the bearer token against DEV_TOKEN"""
    expected_token = getenv_clean("DEV_TOKEN", DEFAULT_DEV_TOKEN)

    if expected_token == DEFAULT_DEV_TOKEN:
        logger.warning("Using default DEV_TOKEN='devtoken'. Set DEV_TOKEN environment variable for production!")

    if not secrets.compare_digest(credentials.credentials, expected_token):
        raise HTTPException(status_code=401, detail="Invalid authentication token")

    return credentials.credentials
