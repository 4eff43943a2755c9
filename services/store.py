"""Persistence operations for projects and their reports.

A ``Store`` wraps a SQLAlchemy session and commits every write it performs.
Failed writes are rolled back before the error is re-raised so the session
stays usable for the next request.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.project import Project
from models.report import Report

__all__ = ["Store"]


class Store:
    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    # Projects
    # ------------------------------
    def list_projects(self) -> list[Project]:
        return self.session.query(Project).all()

    def get_project(self, project_id: int) -> Project | None:
        return self.session.get(Project, project_id)

    def create_project(self, name: str | None, description: str | None = None) -> int:
        """Insert a project and return its assigned id.

        A missing name violates the NOT NULL constraint and raises
        ``IntegrityError``.
        """
        project = Project(name=name, description=description)
        self.session.add(project)
        self._commit()
        return project.id

    def update_project(
        self, project_id: int, name: str | None, description: str | None
    ) -> None:
        """Overwrite name and description. Unknown ids are ignored."""
        self.session.query(Project).filter_by(id=project_id).update(
            {"name": name, "description": description},
            synchronize_session=False,
        )
        self._commit()

    def delete_project(self, project_id: int) -> None:
        """Delete the project's reports, then the project, in one transaction."""
        try:
            self.session.query(Report).filter_by(project_id=project_id).delete(
                synchronize_session=False
            )
            self.session.query(Project).filter_by(id=project_id).delete(
                synchronize_session=False
            )
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self._commit()

    # Reports
    # ------------------------------
    def list_reports(self) -> list[Report]:
        return self.session.query(Report).all()

    def get_report(self, report_id: int) -> Report | None:
        return self.session.get(Report, report_id)

    def create_report(
        self, project_id: int, title: str | None, content: str | None = None
    ) -> int:
        """Insert a report under ``project_id`` and return its id.

        Raises ``IntegrityError`` when the project does not exist.
        """
        report = Report(project_id=project_id, title=title, content=content)
        self.session.add(report)
        self._commit()
        return report.id

    def update_report(self, report_id: int, title: str | None, content: str | None) -> None:
        """Overwrite title and content. The owning project never changes."""
        self.session.query(Report).filter_by(id=report_id).update(
            {"title": title, "content": content},
            synchronize_session=False,
        )
        self._commit()

    def delete_report(self, report_id: int) -> None:
        self.session.query(Report).filter_by(id=report_id).delete(
            synchronize_session=False
        )
        self._commit()
