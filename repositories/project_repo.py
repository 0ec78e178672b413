"""
repositories/project_repo.py
----------------------------
Data access layer for projects and their materials, steps and categories.
All SQL queries touching the `project`, `material`, `step`, `category`
and `project_category` tables live here.

Every public method runs in exactly one transaction: it either commits
and returns, or rolls back and raises DataAccessError.
"""

from typing import Optional

from psycopg2 import extras

from db.connection import transaction
from db.exceptions import DataAccessError
from models.project import Category, Material, Project, Step
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_TABLE = "category"
MATERIAL_TABLE = "material"
PROJECT_TABLE = "project"
PROJECT_CATEGORY_TABLE = "project_category"
STEP_TABLE = "step"


class ProjectRepository:
    """Repository for projects. Exposes insert, fetch-all and fetch-by-id."""

    # ── CREATE ────────────────────────────────────────────

    def insert_project(self, project: Project) -> Project:
        """
        Insert a new project row.

        Args:
            project: A transient Project. Its `project_id` is ignored.

        Returns:
            The same Project with `project_id` set to the generated key.

        Raises:
            DataAccessError: The insert failed and was rolled back. The
                project is left without an id.
        """
        sql = f"""
            INSERT INTO {PROJECT_TABLE}
                (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING project_id;
        """
        try:
            with transaction() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (
                        project.project_name, project.estimated_hours,
                        project.actual_hours, project.difficulty, project.notes,
                    ))
                    project_id = cur.fetchone()[0]
        except Exception as e:
            logger.error(f"Failed to insert project '{project.project_name}': {e}")
            raise DataAccessError("Failed to insert project", e) from e

        project.project_id = project_id
        logger.info(f"Added project '{project.project_name}' #{project.project_id}")
        return project

    # ── READ ──────────────────────────────────────────────

    def fetch_all_projects(self) -> list[Project]:
        """
        Fetch every project ordered by name.

        Child lists (materials, steps, categories) are left empty; use
        fetch_project_by_id for the full detail of one project.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} ORDER BY project_name ASC;"
        try:
            with transaction() as conn:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql)
                    projects = [row_to_project(r) for r in cur.fetchall()]
        except Exception as e:
            logger.error(f"Failed to fetch projects: {e}")
            raise DataAccessError("Failed to fetch projects", e) from e

        logger.debug(f"Fetched {len(projects)} projects")
        return projects

    def fetch_project_by_id(self, project_id: int) -> Optional[Project]:
        """
        Fetch one project together with its materials, steps and categories.

        The project row and the three child queries share one transaction,
        so a failure anywhere means nothing is returned.

        Args:
            project_id: Primary key.

        Returns:
            A fully populated Project, or None if no row has that id.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} WHERE project_id = %s;"
        try:
            with transaction() as conn:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql, (project_id,))
                    row = cur.fetchone()
                project = row_to_project(row) if row else None

                if project is not None:
                    project.materials.extend(self._fetch_materials(conn, project_id))
                    project.steps.extend(self._fetch_steps(conn, project_id))
                    project.categories.extend(self._fetch_categories(conn, project_id))
        except Exception as e:
            logger.error(f"Failed to fetch project #{project_id}: {e}")
            raise DataAccessError(f"Failed to fetch project #{project_id}", e) from e

        if project is None:
            logger.debug(f"No project #{project_id}")
        return project

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _fetch_materials(conn, project_id: int) -> list[Material]:
        sql = f"SELECT m.* FROM {MATERIAL_TABLE} m WHERE project_id = %s;"
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [row_to_material(r) for r in cur.fetchall()]

    @staticmethod
    def _fetch_steps(conn, project_id: int) -> list[Step]:
        sql = f"SELECT s.* FROM {STEP_TABLE} s WHERE project_id = %s;"
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [row_to_step(r) for r in cur.fetchall()]

    @staticmethod
    def _fetch_categories(conn, project_id: int) -> list[Category]:
        sql = f"""
            SELECT c.* FROM {CATEGORY_TABLE} c
            JOIN {PROJECT_CATEGORY_TABLE} pc USING (category_id)
            WHERE project_id = %s;
        """
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [row_to_category(r) for r in cur.fetchall()]


# ── ROW MAPPING ───────────────────────────────────────────

def row_to_project(row: dict) -> Project:
    """Convert a `project` row to a Project with empty child lists."""
    return Project(
        project_id=row["project_id"],
        project_name=row["project_name"],
        estimated_hours=row["estimated_hours"],
        actual_hours=row["actual_hours"],
        difficulty=row["difficulty"],
        notes=row["notes"],
    )


def row_to_material(row: dict) -> Material:
    return Material(
        material_id=row["material_id"],
        project_id=row["project_id"],
        material_name=row["material_name"],
        num_required=row["num_required"],
        cost=row["cost"],
    )


def row_to_step(row: dict) -> Step:
    return Step(
        step_id=row["step_id"],
        project_id=row["project_id"],
        step_text=row["step_text"],
        step_order=row["step_order"],
    )


def row_to_category(row: dict) -> Category:
    return Category(
        category_id=row["category_id"],
        category_name=row["category_name"],
    )
