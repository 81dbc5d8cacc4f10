"""Demo data for local development."""

import logging
import random

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tecnofit.db.models import Exercise, Training, User, UserRole

logger = logging.getLogger(__name__)

USERS = [
    {"name": "Ana Admin", "email": "admin@tecnofit.test", "role": UserRole.ADMIN.value},
    {"name": "Paulo Personal", "email": "paulo@tecnofit.test", "role": UserRole.PERSONAL.value},
    {"name": "Carla Customer", "email": "carla@tecnofit.test", "role": UserRole.CUSTOMER.value},
    {"name": "Bruno Customer", "email": "bruno@tecnofit.test", "role": UserRole.CUSTOMER.value},
    {"name": "Julia Customer", "email": "julia@tecnofit.test", "role": UserRole.CUSTOMER.value},
]

# Training name -> exercises, assigned round robin to the customers above
TRAININGS = {
    "Upper Body A": [
        {"name": "Bench Press", "series": 4, "repetitions": 10, "charge": 40.0},
        {"name": "Pull Up", "series": 4, "repetitions": 8},
        {"name": "Shoulder Press", "series": 3, "repetitions": 12, "charge": 16.0},
    ],
    "Lower Body B": [
        {"name": "Back Squat", "series": 5, "repetitions": 5, "charge": 60.0, "rest_seconds": 120},
        {"name": "Romanian Deadlift", "series": 4, "repetitions": 10, "charge": 50.0},
        {"name": "Walking Lunge", "series": 3, "repetitions": 20},
    ],
    "Core C": [
        {"name": "Plank", "series": 3, "repetitions": 1, "notes": "Hold for 45 seconds"},
        {"name": "Hanging Leg Raise", "series": 3, "repetitions": 12},
    ],
}

EXERCISE_NAMES = [
    "Bench Press",
    "Incline Dumbbell Press",
    "Pull Up",
    "Barbell Row",
    "Back Squat",
    "Leg Press",
    "Romanian Deadlift",
    "Calf Raise",
    "Biceps Curl",
    "Triceps Pushdown",
    "Plank",
    "Burpee",
]


def make_exercise_data(training_id: int | None = None, **overrides) -> dict:
    """Build a random, valid set of exercise attributes."""
    data = {
        "name": random.choice(EXERCISE_NAMES),
        "training_id": training_id,
        "series": random.randint(2, 5),
        "repetitions": random.choice([6, 8, 10, 12, 15]),
        "rest_seconds": random.choice([30, 60, 90]),
    }
    data.update(overrides)
    return data


def seed_demo_data(session: Session) -> bool:
    """Seed users, trainings and exercises if the database is empty.

    Returns:
        True if data was inserted, False if users already existed.
    """
    user_count = session.execute(select(func.count()).select_from(User)).scalar_one()
    if user_count > 0:
        logger.info("Database already seeded, skipping")
        return False

    users = [User(**data) for data in USERS]
    session.add_all(users)
    session.flush()

    customers = [u for u in users if u.role == UserRole.CUSTOMER.value]
    for i, (name, exercises) in enumerate(TRAININGS.items()):
        training = Training(name=name, customer_id=customers[i % len(customers)].id)
        session.add(training)
        session.flush()
        session.add_all(Exercise(training_id=training.id, **data) for data in exercises)

    session.flush()
    logger.info(f"Seeded {len(users)} users and {len(TRAININGS)} trainings")
    return True
