"""
main.py
-------
Entry point for the project tracker.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Print the stored projects, or one project in full when an id is given:
        python main.py
        python main.py 3
"""

import sys

from db.connection import close_pool, init_pool
from db.exceptions import DataAccessError
from db.init_db import create_tables
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    init_pool()
    try:
        create_tables()
        service = ProjectService()

        if argv:
            print(service.get_project(int(argv[0])))
            return 0

        projects = service.list_projects()
        if not projects:
            print("No projects yet.")
        for project in projects:
            print(f"   {project.project_id}: {project.project_name}")
        return 0
    except (DataAccessError, LookupError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
