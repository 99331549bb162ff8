# import all models for Alembic
from firmdesk.db.models.client import Client
from firmdesk.db.models.task import Task
from firmdesk.db.models.assignee import Assignee
from firmdesk.db.models.todo import Todo
from firmdesk.db.models.import_run import ImportRun
from firmdesk.db.models.import_error import ImportRowError
