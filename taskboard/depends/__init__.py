

from .database import (LocationRepoScope, get_location_repo,
                       get_location_repo_scope, get_project_repo,
                       get_task_repo, get_user_repo)
from .get_project import get_project, get_project_owner
from .get_task import get_active_task, get_task, get_task_owner
from .get_user import get_user, get_user_db
