
from .task_status import TaskStatus
