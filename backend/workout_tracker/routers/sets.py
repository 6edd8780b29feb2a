from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from workout_tracker.db import get_db
from workout_tracker.deps.context import RequestLogger, get_request_logger
from workout_tracker.deps.guards import must_exist
from workout_tracker.errors import UnknownExerciseError
from workout_tracker.repositories.set_repo import SetRepository
from workout_tracker.schemas.exercise_set import SetRead, SetWrite

router = APIRouter(prefix="/sets", tags=["sets"])

set_must_exist = must_exist("set_id", "set", SetRepository)


@router.get("/{set_id}", response_model=SetRead, dependencies=[Depends(set_must_exist)])
def get_set(set_id: int, db: Session = Depends(get_db)):
    return SetRead.from_entity(SetRepository(db).find_by_id(set_id))

@router.put("/{set_id}", dependencies=[Depends(set_must_exist)])
def update_set(
    set_id: int,
    payload: SetWrite,
    db: Session = Depends(get_db),
    log: RequestLogger = Depends(get_request_logger),
):
    try:
        SetRepository(db).update(
            set_id,
            exercise_id=payload.exercise_id,
            repetitions=payload.repetitions,
            weight=payload.weight,
            note=payload.note,
        )
    except UnknownExerciseError:
        log.warning("tried to move set to unknown exercise %d", payload.exercise_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="exercise does not exist")
    return Response(status_code=status.HTTP_200_OK)

@router.delete("/{set_id}", dependencies=[Depends(set_must_exist)])
def delete_set(set_id: int, db: Session = Depends(get_db)):
    SetRepository(db).delete(set_id)
    return Response(status_code=status.HTTP_200_OK)
