from core.models import ParamSpec
from tools.resource import PAGINATION_PARAMS, Resource, build_definitions, build_handlers

# No update tool: the API's update verb for tasks is not settled.
RESOURCE = Resource(
    singular="task",
    plural="tasks",
    display="Task",
    path="/tasks",
    query_params={
        **PAGINATION_PARAMS,
        "status": ParamSpec("string", "Filter by task status (optional)"),
    },
    fields={
        "title": ParamSpec("string", "Task title", required=True),
        "description": ParamSpec("string", "Task description"),
        "due_date": ParamSpec("string", "Due date (ISO format)"),
        "assignee_id": ParamSpec("string", "ID of person to assign task to"),
        "priority": ParamSpec("string", "Task priority (low, medium, high)"),
    },
    descriptions={
        "list": "Retrieve tasks from RogerRoger",
        "get": "Retrieve a specific task by ID",
        "create": "Create a new task in RogerRoger",
        "delete": "Delete a task",
    },
)

TOOL_DEFINITIONS = build_definitions(RESOURCE)
HANDLERS = build_handlers(RESOURCE)
