
from .base import Base
from .location import Location
from .project import Project
from .task import Task
from .user import User
