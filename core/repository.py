"""Repository layer between the services and the ORM.

Provides a small generic base plus one repository per aggregate. List and
dict columns are stored as JSON text; the repositories encode on write and
decode on read so services only ever see pydantic models.
"""

import json
from datetime import date, timedelta
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ProfileRequiredError
from database import models
from database.models import Base
from schemas.daily_schema import DailyFeedbackRequest, FeedbackInput, TodaysMealPlan
from schemas.profile_schema import HealthProfile, HealthProfileRequest

T = TypeVar('T', bound=Base)

PROFILE_JSON_FIELDS = ("symptoms", "goals", "lifestyle", "medical_conditions", "medications", "allergies")
PLAN_JSON_FIELDS = ("breakfast", "lunch", "dinner", "snacks", "daily_guidelines", "shopping_list", "adaptations")
FEEDBACK_JSON_FIELDS = ("enjoyed_meals", "disliked_meals", "symptoms_improvement")


def dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def loads(value: Optional[str], default: Any = None) -> Any:
    """Decode a JSON text column; None or corrupt text yields `default`."""
    if not value:
        return default
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return default


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def save(self, obj: T) -> T:
        """Add, commit and refresh an object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def count(self) -> int:
        return self.session.query(self.model).count()


class UserRepository(BaseRepository[models.User]):
    model = models.User

    def create(self, name: str, email: Optional[str] = None) -> models.User:
        return self.save(models.User(name=name, email=email))

    def require(self, user_id: int) -> models.User:
        """Return the user or raise `NotFoundError`."""
        user = self.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user


class ProfileRepository(BaseRepository[models.HealthProfile]):
    """Health profiles; one per user, replaced wholesale on save."""

    model = models.HealthProfile

    def get_row(self, user_id: int) -> Optional[models.HealthProfile]:
        return self.session.query(self.model).filter(self.model.user_id == user_id).first()

    def get_request(self, user_id: int) -> Optional[HealthProfileRequest]:
        """The stored profile exactly as it was submitted."""
        row = self.get_row(user_id)
        if row is None:
            return None
        data = {column.name: getattr(row, column.name) for column in self.model.__table__.columns}
        for field in PROFILE_JSON_FIELDS:
            data[field] = loads(data[field], {} if field == "lifestyle" else [])
        return HealthProfileRequest.model_validate(data)

    def get_profile(self, user_id: int) -> Optional[HealthProfile]:
        """The normalized profile handed to the services."""
        request = self.get_request(user_id)
        return HealthProfile.from_request(request) if request is not None else None

    def require_profile(self, user_id: int) -> HealthProfile:
        profile = self.get_profile(user_id)
        if profile is None:
            raise ProfileRequiredError(user_id)
        return profile

    def save_profile(self, user_id: int, payload: HealthProfileRequest) -> models.HealthProfile:
        row = self.get_row(user_id) or self.model(user_id=user_id)
        data = payload.model_dump()
        for field, value in data.items():
            setattr(row, field, dumps(value) if field in PROFILE_JSON_FIELDS else value)
        row.completed_at = models.utcnow()
        return self.save(row)


class DailyMealPlanRepository(BaseRepository[models.DailyMealPlan]):
    """Daily plans keyed by (user, date); saving again overwrites."""

    model = models.DailyMealPlan

    def get_row(self, user_id: int, plan_date: date) -> Optional[models.DailyMealPlan]:
        return (
            self.session.query(self.model)
            .filter(self.model.user_id == user_id, self.model.plan_date == plan_date)
            .first()
        )

    def get_by_user_date(self, user_id: int, plan_date: date) -> Optional[TodaysMealPlan]:
        row = self.get_row(user_id, plan_date)
        return self.to_schema(row) if row is not None else None

    def upsert(self, user_id: int, plan: TodaysMealPlan) -> models.DailyMealPlan:
        row = self.get_row(user_id, plan.date) or self.model(user_id=user_id, plan_date=plan.date)
        data = plan.model_dump(exclude={"date"})
        row.menstrual_phase = data.pop("menstrual_phase")
        row.personalized_message = data.pop("personalized_message")
        for field in PLAN_JSON_FIELDS:
            setattr(row, field, dumps(data[field]))
        return self.save(row)

    @staticmethod
    def to_schema(row: models.DailyMealPlan) -> TodaysMealPlan:
        data = {field: loads(getattr(row, field)) for field in PLAN_JSON_FIELDS}
        data["snacks"] = data["snacks"] or []
        data["shopping_list"] = data["shopping_list"] or {}
        data["adaptations"] = data["adaptations"] or []
        return TodaysMealPlan.model_validate({
            **data,
            "date": row.plan_date,
            "menstrual_phase": row.menstrual_phase,
            "personalized_message": row.personalized_message or "",
        })


class DailyFeedbackRepository(BaseRepository[models.DailyFeedback]):
    """Feedback keyed by (user, date); resubmitting overwrites."""

    model = models.DailyFeedback

    def get_row(self, user_id: int, feedback_date: date) -> Optional[models.DailyFeedback]:
        return (
            self.session.query(self.model)
            .filter(self.model.user_id == user_id, self.model.feedback_date == feedback_date)
            .first()
        )

    def get_by_user_date(self, user_id: int, feedback_date: date) -> Optional[FeedbackInput]:
        row = self.get_row(user_id, feedback_date)
        return self.to_schema(row) if row is not None else None

    def upsert(self, user_id: int, meal_plan_id: int, feedback: DailyFeedbackRequest) -> models.DailyFeedback:
        row = self.get_row(user_id, feedback.date) or self.model(user_id=user_id, feedback_date=feedback.date)
        row.meal_plan_id = meal_plan_id
        data = feedback.model_dump(exclude={"date"})
        for field, value in data.items():
            setattr(row, field, dumps(value) if field in FEEDBACK_JSON_FIELDS else value)
        return self.save(row)

    def list_since(self, user_id: int, since: date, until: Optional[date] = None) -> List[models.DailyFeedback]:
        """Feedback rows dated within [since, until], oldest first."""
        query = self.session.query(self.model).filter(
            self.model.user_id == user_id, self.model.feedback_date >= since
        )
        if until is not None:
            query = query.filter(self.model.feedback_date <= until)
        return query.order_by(self.model.feedback_date.asc()).all()

    def list_recent(self, user_id: int, days: int, today: Optional[date] = None) -> List[models.DailyFeedback]:
        today = today or date.today()
        return self.list_since(user_id, today - timedelta(days=days - 1), until=today)

    @staticmethod
    def to_schema(row: models.DailyFeedback) -> FeedbackInput:
        return FeedbackInput.model_validate({
            "followed_plan": row.followed_plan,
            "enjoyed_meals": loads(row.enjoyed_meals, []),
            "disliked_meals": loads(row.disliked_meals, []),
            "symptoms_improvement": loads(row.symptoms_improvement, {}),
            "energy_level": row.energy_level,
            "digestive_health": row.digestive_health,
            "mood_rating": row.mood_rating,
            "feedback": row.feedback,
        })
