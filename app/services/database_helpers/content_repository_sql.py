# /app/services/database_helpers/content_repository_sql.py

"""
Raw SQLAlchemy queries for the generation tables: `user_inputs`, `ai_outputs`
and `generation_logs`. Every insert commits on its own; callers get no
transaction spanning several rows.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from app.db.models.content_models import UserInput, AIOutput, GenerationLog


class ContentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- User Input Methods ---
    def add_user_input(self, record: Dict) -> UserInput:
        """Creates a new UserInput row and returns it with its generated id."""
        new_input = UserInput(**record)
        self.db.add(new_input)
        self.db.commit()
        self.db.refresh(new_input)
        return new_input

    def get_user_input_by_id(self, input_id: str) -> Optional[UserInput]:
        return self.db.query(UserInput).filter(UserInput.id == input_id).first()

    def get_recent_user_inputs(self, limit: int = 50) -> List[UserInput]:
        return self.db.query(UserInput).order_by(UserInput.created_at.desc()).limit(limit).all()

    # --- AI Output Methods ---
    def add_ai_output(self, record: Dict) -> AIOutput:
        new_output = AIOutput(**record)
        self.db.add(new_output)
        self.db.commit()
        self.db.refresh(new_output)
        return new_output

    def get_outputs_by_input_id(self, input_id: str) -> List[AIOutput]:
        return (
            self.db.query(AIOutput)
            .filter(AIOutput.input_id == input_id)
            .order_by(AIOutput.variation_number.asc())
            .all()
        )

    # --- Generation Log Methods ---
    def add_generation_log(self, record: Dict) -> GenerationLog:
        new_log = GenerationLog(**record)
        self.db.add(new_log)
        self.db.commit()
        return new_log

    def get_logs_by_input_id(self, input_id: str) -> List[GenerationLog]:
        return self.db.query(GenerationLog).filter(GenerationLog.input_id == input_id).all()
