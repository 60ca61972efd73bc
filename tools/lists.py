from core.models import ParamSpec
from tools.resource import Resource, build_definitions, build_handlers

# Lists are called segments by the CRM API.
RESOURCE = Resource(
    singular="list",
    plural="lists",
    display="List",
    path="/segments",
    update_method="PATCH",
    fields={
        "name": ParamSpec("string", "Name of the list"),
        "description": ParamSpec("string", "Description of the list"),
    },
    descriptions={
        "list": "Retrieve all lists (segments) from RogerRoger CRM",
        "get": "Retrieve a specific list by ID",
        "create": "Create a new list in RogerRoger",
        "update": "Update an existing list",
        "delete": "Delete a list",
    },
)

TOOL_DEFINITIONS = build_definitions(RESOURCE)
HANDLERS = build_handlers(RESOURCE)
