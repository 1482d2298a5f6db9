
from .location_repository import LocationRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository
