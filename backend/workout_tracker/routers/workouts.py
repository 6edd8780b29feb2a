from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from workout_tracker.db import get_db
from workout_tracker.deps.context import RequestLogger, get_request_logger
from workout_tracker.deps.guards import ID_MAX, ID_MIN, must_exist
from workout_tracker.errors import UnknownExerciseError
from workout_tracker.repositories.set_repo import SetRepository
from workout_tracker.repositories.workout_repo import WorkoutRepository
from workout_tracker.schemas.exercise_set import SetRead, SetRecommendationRead, SetWrite
from workout_tracker.schemas.workout import WorkoutCreated, WorkoutRead
from workout_tracker.services.recommendation import RecommendationService

router = APIRouter(prefix="/workouts", tags=["workouts"])

workout_must_exist = must_exist("workout_id", "workout", WorkoutRepository)


@router.get("", response_model=list[WorkoutRead])
def list_workouts(db: Session = Depends(get_db)):
    return [WorkoutRead.from_entity(w) for w in WorkoutRepository(db).find_all()]

@router.post("", response_model=WorkoutCreated)
def create_workout(db: Session = Depends(get_db)):
    return WorkoutCreated(id=WorkoutRepository(db).create())

@router.delete("/{workout_id}", dependencies=[Depends(workout_must_exist)])
def delete_workout(workout_id: int, db: Session = Depends(get_db)):
    WorkoutRepository(db).delete(workout_id)
    return Response(status_code=status.HTTP_200_OK)

@router.get("/{workout_id}/sets", response_model=list[SetRead], dependencies=[Depends(workout_must_exist)])
def list_sets(workout_id: int, db: Session = Depends(get_db)):
    return [SetRead.from_entity(s) for s in SetRepository(db).find_by_workout_id(workout_id)]

@router.post("/{workout_id}/sets", dependencies=[Depends(workout_must_exist)])
def add_set(
    workout_id: int,
    payload: SetWrite,
    db: Session = Depends(get_db),
    log: RequestLogger = Depends(get_request_logger),
):
    try:
        SetRepository(db).create(
            workout_id,
            exercise_id=payload.exercise_id,
            repetitions=payload.repetitions,
            weight=payload.weight,
            note=payload.note,
        )
    except UnknownExerciseError:
        log.warning("tried to add set for unknown exercise %d", payload.exercise_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="exercise does not exist")
    return Response(status_code=status.HTTP_200_OK)

@router.get(
    "/{workout_id}/sets/recommendation",
    response_model=SetRecommendationRead,
    dependencies=[Depends(workout_must_exist)],
)
def recommend_set(
    workout_id: int,
    exercise_id: int | None = Query(None, alias="exerciseId", ge=ID_MIN, le=ID_MAX),
    db: Session = Depends(get_db),
):
    rec = RecommendationService(db).recommend(workout_id, exercise_id)
    return SetRecommendationRead(exercise_id=rec.exercise_id, repetitions=rec.repetitions, weight=rec.weight)
