"""SQLAlchemy-backed repository for chart milestones."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.milestones_repository import (
    MilestonesRepositoryPort,
)
from src.domain.models import Milestone
from src.infrastructure.db import translate_storage_errors

INSERT_MILESTONE_SQL = text(
    """
    INSERT INTO milestones (id, date, label, account_id, created_at)
    VALUES (:id, :date, :label, :account_id, :created_at)
    """
)

DELETE_MILESTONE_SQL = text("DELETE FROM milestones WHERE id = :milestone_id")


class SqlAlchemyMilestonesRepository(MilestonesRepositoryPort):
    """Repository backed by SQLAlchemy for milestones."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def insert_milestone(self, milestone: Milestone) -> None:
        engine = self._db_port.get_engine()
        with translate_storage_errors("create milestone"):
            with engine.begin() as conn:
                conn.execute(
                    INSERT_MILESTONE_SQL,
                    {
                        "id": milestone.id,
                        "date": milestone.date.isoformat(),
                        "label": milestone.label,
                        "account_id": milestone.account_id,
                        "created_at": milestone.created_at,
                    },
                )

    def list_milestones(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Milestone]:
        base_sql = """
        SELECT id, date, label, account_id, created_at
        FROM milestones
        WHERE 1=1
        """
        params: dict[str, str] = {}
        if from_date:
            base_sql += " AND date >= :from_date"
            params["from_date"] = from_date.isoformat()
        if to_date:
            base_sql += " AND date <= :to_date"
            params["to_date"] = to_date.isoformat()
        base_sql += " ORDER BY date, label"
        engine = self._db_port.get_engine()
        with translate_storage_errors("list milestones"):
            with engine.connect() as conn:
                rows = conn.execute(text(base_sql), params).all()
        return [
            Milestone(
                id=row.id,
                date=date.fromisoformat(row.date),
                label=row.label,
                account_id=row.account_id,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def delete_milestone(self, milestone_id: str) -> None:
        engine = self._db_port.get_engine()
        with translate_storage_errors("delete milestone"):
            with engine.begin() as conn:
                conn.execute(
                    DELETE_MILESTONE_SQL,
                    {"milestone_id": milestone_id},
                )


__all__ = ["SqlAlchemyMilestonesRepository"]
