from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from workout_tracker.db import get_db
from workout_tracker.deps.context import RequestLogger, get_request_logger
from workout_tracker.deps.guards import must_exist
from workout_tracker.errors import ExerciseExistsError, ExerciseInUseError
from workout_tracker.repositories.exercise_repo import ExerciseRepository
from workout_tracker.schemas.exercise import ExerciseCount, ExerciseExists, ExerciseName, ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

exercise_must_exist = must_exist("exercise_id", "exercise", ExerciseRepository)


@router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db)):
    return ExerciseRepository(db).find_all()

@router.post("", response_model=ExerciseRead)
def create_exercise(
    payload: ExerciseName,
    db: Session = Depends(get_db),
    log: RequestLogger = Depends(get_request_logger),
):
    try:
        return ExerciseRepository(db).create(payload.name)
    except ExerciseExistsError:
        log.warning("tried to create existing exercise %r", payload.name)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="exercise already exists")

@router.post("/exists", response_model=ExerciseExists)
def exercise_exists(payload: ExerciseName, db: Session = Depends(get_db)):
    return ExerciseExists(exists=ExerciseRepository(db).exists_by_name(payload.name))

@router.put("/{exercise_id}", response_model=ExerciseRead, dependencies=[Depends(exercise_must_exist)])
def update_exercise(
    exercise_id: int,
    payload: ExerciseName,
    db: Session = Depends(get_db),
    log: RequestLogger = Depends(get_request_logger),
):
    try:
        return ExerciseRepository(db).update(exercise_id, payload.name)
    except ExerciseExistsError:
        log.warning("tried to rename exercise to existing name %r", payload.name)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="exercise already exists")

@router.delete("/{exercise_id}", dependencies=[Depends(exercise_must_exist)])
def delete_exercise(
    exercise_id: int,
    db: Session = Depends(get_db),
    log: RequestLogger = Depends(get_request_logger),
):
    try:
        ExerciseRepository(db).delete(exercise_id)
    except ExerciseInUseError:
        log.warning("tried to delete exercise that is used in sets")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="exercise is used in sets")
    return Response(status_code=status.HTTP_200_OK)

@router.get("/{exercise_id}/count", response_model=ExerciseCount, dependencies=[Depends(exercise_must_exist)])
def exercise_usage_count(exercise_id: int, db: Session = Depends(get_db)):
    return ExerciseCount(count=ExerciseRepository(db).usage_in_sets(exercise_id))
