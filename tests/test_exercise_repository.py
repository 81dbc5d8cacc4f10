"""Tests for the exercise and user repositories."""

from tecnofit.db.models import Exercise, UserRole
from tecnofit.db.repositories import ExerciseRepository, UserRepository


class TestExerciseRepository:
    """Tests for Exercise-specific operations."""

    def test_bound_to_exercise(self, test_session):
        """Test that the repository serves the Exercise model."""
        assert ExerciseRepository(test_session).get_model() is Exercise

    def test_delete_all_by_training_id(self, test_session, training_factory, exercise_factory):
        """Test that only the exercises of the given training are deleted."""
        legs = training_factory(name="Legs")
        arms = training_factory(name="Arms")
        for _ in range(3):
            exercise_factory(legs.id)
        kept = [exercise_factory(arms.id), exercise_factory(arms.id), exercise_factory()]
        repo = ExerciseRepository(test_session)

        deleted = repo.delete_all_exercises_by_training_id(legs.id)

        assert deleted == 3
        assert repo.find_by_training_id(legs.id) == []
        assert repo.all() == kept

    def test_delete_all_is_idempotent(self, test_session, training_factory, exercise_factory):
        """Test that a second call deletes nothing."""
        training = training_factory()
        exercise_factory(training.id)
        exercise_factory(training.id)
        repo = ExerciseRepository(test_session)

        assert repo.delete_all_exercises_by_training_id(training.id) == 2
        assert repo.delete_all_exercises_by_training_id(training.id) == 0

    def test_delete_all_removes_from_session(self, test_session, training_factory, exercise_factory):
        """Test that deleted exercises are no longer returned by find."""
        training = training_factory()
        exercise = exercise_factory(training.id)
        repo = ExerciseRepository(test_session)

        repo.delete_all_exercises_by_training_id(training.id)

        assert repo.find(exercise.id) is None

    def test_find_by_training_id(self, test_session, training_factory, exercise_factory):
        """Test listing the exercises of a training in ID order."""
        training = training_factory()
        first = exercise_factory(training.id)
        exercise_factory()
        second = exercise_factory(training.id)

        assert ExerciseRepository(test_session).find_by_training_id(training.id) == [first, second]


class TestUserRepository:
    """Tests for User-specific operations."""

    def test_get_all_customers(self, test_session, user_factory):
        """Test that only customers are returned."""
        user_factory(role=UserRole.ADMIN.value)
        carla = user_factory(role=UserRole.CUSTOMER.value)
        user_factory(role=UserRole.PERSONAL.value)
        bruno = user_factory(role=UserRole.CUSTOMER.value)

        assert UserRepository(test_session).get_all_customers() == [carla, bruno]

    def test_get_all_customers_none(self, test_session, user_factory):
        """Test that no customers yields an empty list."""
        user_factory(role=UserRole.ADMIN.value)
        assert UserRepository(test_session).get_all_customers() == []

    def test_seeded_customers(self, seeded_test_session):
        """Test the customers of the demo data."""
        customers = UserRepository(seeded_test_session).get_all_customers()
        assert len(customers) == 3
        assert {c.role for c in customers} == {UserRole.CUSTOMER.value}
