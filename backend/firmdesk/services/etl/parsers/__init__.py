from firmdesk.services.etl.columns import EntitySchema, EntityType
from firmdesk.services.etl.parsers.assignees import ASSIGNEE_SCHEMA
from firmdesk.services.etl.parsers.clients import CLIENT_SCHEMA
from firmdesk.services.etl.parsers.tasks import TASK_SCHEMA
from firmdesk.services.etl.parsers.todos import TODO_SCHEMA

SCHEMAS: dict[EntityType, EntitySchema] = {
    EntityType.client: CLIENT_SCHEMA,
    EntityType.task: TASK_SCHEMA,
    EntityType.assignee: ASSIGNEE_SCHEMA,
    EntityType.todo: TODO_SCHEMA,
}

def get_schema(entity: EntityType | str) -> EntitySchema:
    return SCHEMAS[EntityType(entity)]
