import json
import logging
from io import BytesIO
import pandas as pd
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.models import CurrentUser
from companion.exercises.repository import ExerciseResponseRepository
from companion.goals.service import GoalsService
from companion.ratings.repository import PromptRatingRepository
from companion.reports.exceptions import ExportUnavailableException
from companion.reports.schemas import ProfileExportResponse, ProfileSchema
from companion.utils.timezone import to_display_tz, utcnow

logger = logging.getLogger(__name__)


def _format_time(value, tz_name: str) -> str:
    return to_display_tz(value, tz_name).strftime("%Y-%m-%d %H:%M") if value else ""


class ExportService:
    """Service for exporting a user's data"""

    def __init__(self, db: AsyncSession, user: CurrentUser, tz_name: str = "UTC"):
        self.db = db
        self.user = user
        self.tz_name = tz_name

    async def collect(self) -> ProfileExportResponse:
        """Gather the user's profile, exercise responses, ratings and goals."""
        try:
            responses = await ExerciseResponseRepository(self.db, self.user.user_id).list_responses()
            ratings = await PromptRatingRepository(self.db, self.user.user_id).list_for_user()
        except SQLAlchemyError as e:
            logger.error(f"Error collecting export data for user {self.user.user_id}: {e}")
            await self.db.rollback()
            raise ExportUnavailableException()
        goals = await GoalsService(self.db, self.user.user_id).get_goals()

        return ProfileExportResponse.model_validate(
            {
                "profile": ProfileSchema(name=self.user.name, email=self.user.email, join_date=self.user.created_at),
                "exercises": responses,
                "ratings": ratings,
                "goals": goals,
                "export_date": utcnow(),
            },
            from_attributes=True,
        )

    def generate_csv(self, export: ProfileExportResponse) -> BytesIO:
        """Generate CSV file with one row per exercise response"""
        data = []
        for item in export.exercises:
            data.append({
                'Exercise ID': item.exercise_id,
                'Response': json.dumps(item.response, ensure_ascii=False),
                'Created At': _format_time(item.created_at, self.tz_name),
                'Updated At': _format_time(item.updated_at, self.tz_name),
            })
        df = pd.DataFrame(data, columns=['Exercise ID', 'Response', 'Created At', 'Updated At'])
        buffer = BytesIO()
        df.to_csv(buffer, index=False)
        buffer.seek(0)
        return buffer

    def generate_pdf(self, export: ProfileExportResponse, title: str) -> BytesIO:
        """Generate PDF file summarising the export"""
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=letter)
        width, height = letter
        line_x1 = 50
        line_x2 = width - 50

        c.setFont("Helvetica-Bold", 16)
        c.drawString(100, height - 50, title)

        c.setFont("Helvetica", 10)
        y = height - 80
        c.drawString(50, y, f"Name: {export.profile.name or ''}")
        c.drawString(50, y - 15, f"Email: {export.profile.email or ''}")
        c.drawString(50, y - 30, f"Exported: {_format_time(export.export_date, self.tz_name)}")
        y -= 60

        def ensure_space(needed: int):
            nonlocal y
            if y - needed < 50:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = height - 50

        def heading(text: str):
            nonlocal y
            ensure_space(30)
            c.setFont("Helvetica-Bold", 12)
            c.drawString(50, y, text)
            c.setFont("Helvetica", 10)
            y -= 20

        heading(f"Exercise Responses ({len(export.exercises)})")
        for item in export.exercises:
            ensure_space(40)
            c.drawString(50, y, f"Exercise: {item.exercise_id}")
            c.drawString(50, y - 15, f"Last updated: {_format_time(item.updated_at, self.tz_name)}")
            c.setLineWidth(0.5)
            c.line(line_x1, y - 25, line_x2, y - 25)
            y -= 40

        heading(f"Prompt Ratings ({len(export.ratings)})")
        for rating in export.ratings:
            ensure_space(20)
            c.drawString(50, y, f"{rating.prompt_type} prompt {rating.prompt_id}: {rating.overall_score:.2f}")
            y -= 15

        heading(f"Goals ({len(export.goals.goals)})")
        if export.goals.vision:
            ensure_space(20)
            c.drawString(50, y, f"Vision: {export.goals.vision}")
            y -= 15
        for goal in export.goals.goals:
            ensure_space(20)
            deadline = f" (by {goal.deadline})" if goal.deadline else ""
            c.drawString(50, y, f"- {goal.title}{deadline}")
            y -= 15

        c.save()
        buffer.seek(0)
        return buffer
