from core.models import ParamSpec
from tools.resource import Resource, build_definitions, build_handlers

RESOURCE = Resource(
    singular="tag",
    plural="tags",
    display="Tag",
    path="/tags",
    update_method="PATCH",
    fields={
        "name": ParamSpec("string", "Name of the tag"),
        "color": ParamSpec("string", "Tag color (optional)"),
    },
    descriptions={
        "list": "Retrieve all tags from RogerRoger CRM",
        "get": "Retrieve a specific tag by ID",
        "create": "Create a new tag in RogerRoger",
        "update": "Update an existing tag",
        "delete": "Delete a tag",
    },
)

TOOL_DEFINITIONS = build_definitions(RESOURCE)
HANDLERS = build_handlers(RESOURCE)
