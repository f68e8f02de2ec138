from .attachments import AttachmentService
from .chat import ChatService
from .checklists import ChecklistService
from .comments import CommentService
from .custom_fields import CustomFieldService
from .dependencies import DependencyService
from .docs import DocService
from .folders import FolderService
from .lists import ListService
from .spaces import SpaceService
from .tasks import TaskService
from .time_tracking import TimeTrackingService
from .views import ViewService

__all__ = [
    "AttachmentService",
    "ChatService",
    "ChecklistService",
    "CommentService",
    "CustomFieldService",
    "DependencyService",
    "DocService",
    "FolderService",
    "ListService",
    "SpaceService",
    "TaskService",
    "TimeTrackingService",
    "ViewService",
]
