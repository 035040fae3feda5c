"""SQLAlchemy ORM models for the cycle nutrition coach.

Users own exactly one health profile, at most one daily meal plan per date
and at most one feedback record per date. List and dict fields are stored
as JSON-encoded text; `core.repository` handles the encoding.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """ORM model representing an application user."""

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class HealthProfile(Base):
    """Onboarding answers for a user.

    Values are kept as the user entered them (strings for age, cycle length,
    sleep hours, ...); normalization happens when the row is read back into
    `schemas.profile_schema.HealthProfile`.
    """

    __tablename__ = "health_profiles"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    age = Column(String, nullable=True)
    height = Column(String, nullable=True)
    weight = Column(String, nullable=True)
    diet = Column(String, nullable=True)
    symptoms = Column(Text, nullable=True)
    goals = Column(Text, nullable=True)
    lifestyle = Column(Text, nullable=True)
    medical_conditions = Column(Text, nullable=True)
    medications = Column(Text, nullable=True)
    allergies = Column(Text, nullable=True)
    last_period_date = Column(String, nullable=True)
    cycle_length = Column(String, nullable=True)
    period_length = Column(String, nullable=True)
    irregular_periods = Column(Boolean, default=False)
    stress_level = Column(String, nullable=True)
    sleep_hours = Column(String, nullable=True)
    exercise_level = Column(String, nullable=True)
    water_intake = Column(String, nullable=True)
    completed_at = Column(DateTime(timezone=True), default=utcnow)


class DailyMealPlan(Base):
    """Meal plan generated for one user on one date (regeneration overwrites)."""

    __tablename__ = "daily_meal_plans"
    __table_args__ = (UniqueConstraint("user_id", "plan_date", name="uq_daily_meal_plan_user_date"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    plan_date = Column(Date, nullable=False)
    menstrual_phase = Column(String, nullable=False)
    personalized_message = Column(Text, nullable=True)
    breakfast = Column(Text, nullable=False)
    lunch = Column(Text, nullable=False)
    dinner = Column(Text, nullable=False)
    snacks = Column(Text, nullable=False)
    daily_guidelines = Column(Text, nullable=False)
    shopping_list = Column(Text, nullable=True)
    adaptations = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class DailyFeedback(Base):
    """User's self-reported outcome of the plan for one date."""

    __tablename__ = "daily_feedback"
    __table_args__ = (UniqueConstraint("user_id", "feedback_date", name="uq_daily_feedback_user_date"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    meal_plan_id = Column(Integer, ForeignKey("daily_meal_plans.id"), nullable=False)
    feedback_date = Column(Date, nullable=False)
    followed_plan = Column(Boolean, nullable=True)
    enjoyed_meals = Column(Text, nullable=True)
    disliked_meals = Column(Text, nullable=True)
    symptoms_improvement = Column(Text, nullable=True)
    energy_level = Column(Integer, nullable=True)  # 1-5
    digestive_health = Column(Integer, nullable=True)  # 1-5
    mood_rating = Column(Integer, nullable=True)  # 1-5
    feedback = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
