"""ORM models for the companion tables"""
from uuid import uuid4
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from companion.db.base import Base
from companion.utils.timezone import utcnow


class Chapter(Base):
    """Book chapter (reference data)"""
    __tablename__ = "chapters"

    number = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(255), nullable=False)
    part = Column(Integer, nullable=False)


class BookPrompt(Base):
    """Prompt printed in the book (reference data)"""
    __tablename__ = "book_prompts"

    id = Column(String(100), primary_key=True)
    chapter = Column(Integer, nullable=False, index=True)
    category = Column(String(100), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    prompt = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    pro_tip = Column(Text, nullable=True)
    is_from_book = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)


class BookExercise(Base):
    """Exercise from the book; `fields` may hold an object or a JSON string"""
    __tablename__ = "book_exercises"

    id = Column(String(100), primary_key=True)
    chapter = Column(Integer, nullable=False, index=True)
    exercise_number = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    type = Column(String(50), nullable=False)
    fields = Column(JSON, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)


class PromptRating(Base):
    """Multi-dimension rating; one per user, prompt and prompt type"""
    __tablename__ = "prompt_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", "prompt_type", name="uq_prompt_ratings_user_prompt"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    prompt_id = Column(String(100), nullable=False, index=True)
    prompt_type = Column(String(20), nullable=False)  # book | user
    dimensions = Column(JSON, nullable=False)  # {effectiveness, clarity, timeValue}
    overall_score = Column(Float, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class PromptFeedback(Base):
    """Free-text feedback on a prompt"""
    __tablename__ = "prompt_feedback"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    prompt_id = Column(String(100), nullable=False, index=True)
    prompt_type = Column(String(20), nullable=False)
    feedback_type = Column(String(30), nullable=False)  # SUCCESS_STORY | MODIFICATION | ISSUE | SUGGESTION
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    is_public = Column(Boolean, nullable=False, default=True)
    helpful_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class QuickRating(Base):
    """Single 1-5 star rating; one per user, prompt and prompt type"""
    __tablename__ = "quick_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", "prompt_type", name="uq_quick_ratings_user_prompt"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    prompt_id = Column(String(100), nullable=False)
    prompt_type = Column(String(20), nullable=False)  # book | user | library
    rating = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class SuccessStory(Base):
    """User story of a prompt that worked"""
    __tablename__ = "success_stories"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    prompt_id = Column(String(100), nullable=False, index=True)
    prompt_type = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    output_shared = Column(Boolean, nullable=False, default=False)
    output_content = Column(Text, nullable=True)
    time_saved = Column(Float, nullable=True)  # hours
    is_anonymous = Column(Boolean, nullable=False, default=False)
    is_public = Column(Boolean, nullable=False, default=True)
    helpful_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class UserReward(Base):
    """Points ledger entry. Append-only."""
    __tablename__ = "user_rewards"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    action_type = Column(String(50), nullable=False)
    points_earned = Column(Integer, nullable=False)
    badge_earned = Column(String(100), nullable=True)
    prompt_id = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class UserGoals(Base):
    """90-day goals and vision statement"""
    __tablename__ = "user_goals"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    goals = Column(JSON, nullable=False, default=list)
    vision = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class GoalMilestone(Base):
    """Milestone of one goal entry inside `user_goals.goals`"""
    __tablename__ = "goal_milestones"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    goal_id = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    target_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class ExerciseResponse(Base):
    """User's answers to one book exercise"""
    __tablename__ = "exercise_responses"
    __table_args__ = (
        UniqueConstraint("user_id", "exercise_id", name="uq_exercise_responses_user_exercise"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    exercise_id = Column(String(100), nullable=False)
    response = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class SavedPrompt(Base):
    """Library prompt saved to a user's personal collection"""
    __tablename__ = "saved_prompts"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", name="uq_saved_prompts_user_prompt"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    prompt_id = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
