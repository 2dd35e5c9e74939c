# querykit/query/routes.py
"""
HTTP endpoints for building query strings.

POST /query            -> build from a JSON body
GET  /query/normalize  -> rebuild the request's own query parameters
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from querykit.config import Settings
from querykit.query.builder import build_multi_query, build_query
from querykit.query.dependencies import get_settings
from querykit.query.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["Query"])


class QueryRequest(BaseModel):
    params: dict[str, str | list[str] | None] | None = None
    pair_separator: str | None = None
    key_value_separator: str | None = None
    include_prefix: bool | None = None


class QueryResponse(BaseModel):
    query: str


@router.post("", response_model=QueryResponse)
async def create_query(body: QueryRequest, settings: Settings = Depends(get_settings)):
    """
    Build a query string from the posted parameters.
    Options left out of the body fall back to the configured defaults.
    A list value makes the request multi-valued.
    """
    pair_separator = body.pair_separator if body.pair_separator is not None else settings.pair_separator
    key_value_separator = (
        body.key_value_separator if body.key_value_separator is not None else settings.key_value_separator
    )
    include_prefix = body.include_prefix if body.include_prefix is not None else settings.include_prefix

    params = body.params
    multi = params is not None and any(isinstance(v, list) for v in params.values())
    builder = build_multi_query if multi else build_query

    try:
        query = builder(params, pair_separator, key_value_separator, include_prefix)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Built {'multi-valued' if multi else 'single-valued'} query ({len(query)} chars)")
    return QueryResponse(query=query)


@router.get("/normalize", response_model=QueryResponse)
async def normalize_query(request: Request, settings: Settings = Depends(get_settings)):
    """
    Rebuild the incoming query parameters: blank keys/values dropped,
    repeated keys grouped, values escaped.
    """
    query = build_multi_query(
        request.query_params,
        settings.pair_separator,
        settings.key_value_separator,
        settings.include_prefix,
    )
    logger.info(f"Normalized query ({len(query)} chars)")
    return QueryResponse(query=query)
