from core.models import ParamSpec
from tools.resource import PAGINATION_PARAMS, Resource, build_definitions, build_handlers

RESOURCE = Resource(
    singular="person",
    plural="people",
    display="Person",
    path="/people",
    update_method="PUT",
    query_params={
        **PAGINATION_PARAMS,
        "q": ParamSpec("string", "Search query to filter people (optional)"),
    },
    fields={
        "name": ParamSpec("string", "Full name of the person"),
        "email": ParamSpec("string", "Email address"),
        "phone": ParamSpec("string", "Phone number"),
        "company": ParamSpec("string", "Company name"),
        "notes": ParamSpec("string", "Additional notes"),
    },
    descriptions={
        "list": "Retrieve all people/contacts from RogerRoger CRM",
        "get": "Retrieve a specific person by ID",
        "create": "Create a new person/contact in RogerRoger",
        "update": "Update an existing person/contact",
        "delete": "Delete a person/contact",
    },
)

TOOL_DEFINITIONS = build_definitions(RESOURCE)
HANDLERS = build_handlers(RESOURCE)
