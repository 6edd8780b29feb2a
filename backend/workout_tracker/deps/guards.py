# workout_tracker/deps/guards.py
from __future__ import annotations
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workout_tracker.db import get_db
from workout_tracker.deps.context import RequestLogger, get_request_logger
from workout_tracker.repositories.base import ExistenceLookup


# ids are stored as signed 64-bit integers
ID_MIN, ID_MAX = -2**63, 2**63 - 1


def parse_id(raw: str | None) -> int:
    if raw is None:
        raise ValueError("missing id")
    value = int(raw, 10)
    if not ID_MIN <= value <= ID_MAX:
        raise ValueError(f"id out of range: {raw}")
    return value


def must_exist(param: str, kind: str, lookup: Callable[[Session], ExistenceLookup]):
    """
    Existence guard for routes parameterized by an entity id.

    Usage:
      dependencies=[Depends(must_exist("workout_id", "workout", WorkoutRepository))]

    Rejects the request before the handler runs when:
      - {param} is not an integer  -> 400
      - the lookup fails           -> 500
      - no row has that id         -> 404
    """
    def dependency(
        request: Request,
        db: Session = Depends(get_db),
        log: RequestLogger = Depends(get_request_logger),
    ) -> int:
        try:
            entity_id = parse_id(request.path_params.get(param))
        except ValueError:
            log.warning("failed to parse URL parameter %s", param)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid path parameter")

        try:
            exists = lookup(db).exists_by_id(entity_id)
        except SQLAlchemyError:
            log.exception("failed to check if %s %d exists", kind, entity_id)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal server error")

        if not exists:
            log.warning("request for %s with non existing id %d", kind, entity_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} does not exist")
        return entity_id
    return dependency
