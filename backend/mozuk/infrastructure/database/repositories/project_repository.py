"""Concrete repository implementation for Project backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.application.interfaces import ProjectRepository
from mozuk.domain.entities import Project, ProjectStatus, ProjectTag
from mozuk.infrastructure.database.models import ProjectModel

from ._integrity import flush_or_duplicate


class SQLAlchemyProjectRepository(ProjectRepository):
    """Implements the ProjectRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProjectModel) -> Project:
        """Map ORM model → domain entity."""
        return Project(
            id=model.id,
            client_id=model.client_id,
            display_id=model.display_id,
            name=model.name,
            description=model.description,
            status=ProjectStatus(model.status),
            project_date=model.project_date,
            project_location=model.project_location,
            project_tag=ProjectTag(model.project_tag),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, model: ProjectModel, entity: Project) -> None:
        model.client_id = entity.client_id
        model.display_id = entity.display_id
        model.name = entity.name
        model.description = entity.description
        model.status = entity.status.value
        model.project_date = entity.project_date
        model.project_location = entity.project_location
        model.project_tag = entity.project_tag.value
        model.updated_at = entity.updated_at

    async def get_by_id(self, project_id: str) -> Project | None:
        result = await self._session.get(ProjectModel, project_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        client_id: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Project]:
        stmt = select(ProjectModel)
        if client_id is not None:
            stmt = stmt.where(ProjectModel.client_id == client_id)
        stmt = stmt.order_by(ProjectModel.created_at.desc()).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_ids(self, project_ids: list[str]) -> list[Project]:
        if not project_ids:
            return []
        stmt = select(ProjectModel).where(ProjectModel.id.in_(project_ids))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(ProjectModel.id)))
        return result.scalar_one()

    async def count_by_client(self) -> dict[str, int]:
        stmt = select(ProjectModel.client_id, func.count(ProjectModel.id)).group_by(
            ProjectModel.client_id
        )
        result = await self._session.execute(stmt)
        return {client_id: count for client_id, count in result.all()}

    async def create(self, project: Project) -> Project:
        model = ProjectModel(id=project.id, created_at=project.created_at)
        self._apply(model, project)
        self._session.add(model)
        await flush_or_duplicate(self._session, "Project", "display_id", project.display_id)
        return self._to_entity(model)

    async def update(self, project: Project) -> Project:
        model = await self._session.get(ProjectModel, project.id)
        if model is None:
            raise ValueError(f"Project {project.id} not found in database")
        self._apply(model, project)
        await flush_or_duplicate(self._session, "Project", "display_id", project.display_id)
        return self._to_entity(model)

    async def delete(self, project_id: str) -> bool:
        model = await self._session.get(ProjectModel, project_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
