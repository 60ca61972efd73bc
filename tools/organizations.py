from core.models import ParamSpec
from tools.resource import PAGINATION_PARAMS, Resource, build_definitions, build_handlers

RESOURCE = Resource(
    singular="organization",
    plural="organizations",
    display="Organization",
    path="/organizations",
    update_method="PUT",
    query_params={
        **PAGINATION_PARAMS,
        "q": ParamSpec("string", "Search query to filter organizations (optional)"),
    },
    fields={
        "name": ParamSpec("string", "Organization name"),
        "email": ParamSpec("string", "Email address"),
        "phone": ParamSpec("string", "Phone number"),
        "website": ParamSpec("string", "Website URL"),
        "address": ParamSpec("string", "Postal address"),
        "notes": ParamSpec("string", "Additional notes"),
    },
    descriptions={
        "list": "Retrieve all organizations from RogerRoger CRM",
        "get": "Retrieve a specific organization by ID",
        "create": "Create a new organization in RogerRoger",
        "update": "Update an existing organization",
        "delete": "Delete an organization",
    },
)

TOOL_DEFINITIONS = build_definitions(RESOURCE)
HANDLERS = build_handlers(RESOURCE)
