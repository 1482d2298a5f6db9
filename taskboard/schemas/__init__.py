
from .location import DriverSchema, LocationCreateSchema, LocationSchema
from .pagination import Pagination, total_pages
from .project import (CreateProjectSchema, EditProjectSchema,
                      ProjectPageSchema, ProjectSchema)
from .task import (BulkUpdateResultSchema, BulkUpdateTaskSchema,
                   TaskCreateSchema, TaskPageSchema, TaskSchema,
                   TaskUpdateSchema)
from .user import (CredsSchema, LoggedUserSchema, LoginResponseSchema,
                   RegisterSchema, UserSchema)
from .websocket import WebsocketMessage
