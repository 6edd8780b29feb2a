"""initial workout/exercise/exercise_set + default exercises

Revision ID: 4f1c2a9d7b31
Revises:
Create Date: 2026-10-18 10:12:03.418207

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b31'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_EXERCISES = [
    'Stretching',
    'Handstand',
    'Squats',
    'Deadlifts',
    'Overhead Press (Barbell)',
    'Shoulder Press (Machine)',
    'Lateral Raise (Machine)',
    'Bench Press',
    'Biceps Curl (Machine)',
    'Butterfly (Machine)',
    'Reverse Butterfly (Machine)',
    'Muscle Up',
    'Front Lever',
    'Back Lever',
    'Human Flag',
    'Pull Up',
    'Lat Pulldown (Tower)',
    'Seated Row (Tower)',
    'Dips',
    'Leg Extension',
    'Leg Press',
    'Calf Raise',
    'Hip Adduction (Machine)',
    'Hip Abduction (Machine)',
]


def upgrade() -> None:
    # 1) workout table
    op.create_table(
        'workout',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('started_at', sa.DateTime(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
    )

    # 2) exercise table, names unique regardless of case
    exercise = op.create_table(
        'exercise',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
    )
    op.create_index('ix_exercise_name_lower', 'exercise', [sa.text('lower(name)')], unique=True)

    # 3) exercise_set table; sets follow their workout, but pin their exercise
    op.create_table(
        'exercise_set',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workout.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercise.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('repetitions', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
    )
    op.create_index('ix_exercise_set_workout_id', 'exercise_set', ['workout_id'])
    op.create_index('ix_exercise_set_exercise_id', 'exercise_set', ['exercise_id'])
    op.create_index('ix_exercise_set_workout_created', 'exercise_set', ['workout_id', 'created_at'])

    # 4) default catalog
    op.bulk_insert(exercise, [{'name': name} for name in DEFAULT_EXERCISES])


def downgrade() -> None:
    # drop child table first
    op.drop_table('exercise_set')
    op.drop_index('ix_exercise_name_lower', table_name='exercise')
    op.drop_table('exercise')
    op.drop_table('workout')
